"""チャクラ診断エンジン"""
import logging
from typing import Dict, List

from pydantic import BaseModel

from ..base import BaseDivinationEngine
from ..data.chakras import CHAKRAS
from ..interpretation import pick
from ..seed import char_code_sum

logger = logging.getLogger(__name__)

BALANCE_LABELS = {
    'balanced': '調和',
    'overactive': '過活動',
    'underactive': '低活動',
    'blocked': 'ブロック',
}

ENERGY_QUALITY = {
    'balanced': 'なめらかで調和的',
    'overactive': '過剰で乱れがち',
    'underactive': '弱く停滞気味',
    'blocked': '滞り、詰まっている',
}

# 質問のキーワードで開きやすくなるチャクラ
QUESTION_BOOSTS = [
    (1, ('安全', 'お金', '仕事'), 20),
    (4, ('恋愛', '愛', '関係'), 25),
    (7, ('霊', '悟り', '意味'), 30),
]

WEEKDAYS = ['月曜日', '火曜日', '水曜日', '木曜日', '金曜日', '土曜日', '日曜日']

KUNDALINI_ACTIVITY = {
    'dormant': '眠っている',
    'stirring': '目覚めの兆し',
    'rising': '上昇中',
    'active': '活性化',
}

CATEGORY_FOCUS = {
    '恋愛・結婚': 4,
    '仕事・転職': 3,
    '金運・財運': 1,
    '健康': 1,
    '人間関係': 5,
}


class ChakraState(BaseModel):
    number: int
    name: str
    sanskrit: str
    color: str
    element: str
    openness: int
    balance: str
    balance_label: str
    rotation: str
    vibration: int
    energy_quality: str
    symptoms: List[str]


class Kundalini(BaseModel):
    awakened: bool
    current_level: int
    activity: str
    blockages: List[int]
    guidance: str


class OverallBalance(BaseModel):
    score: int
    strengths: List[str]
    weaknesses: List[str]
    primary_imbalance: str
    root_cause: str


class HealingPractice(BaseModel):
    chakra: str
    stones: List[str]
    oils: List[str]
    yoga: List[str]
    sound: str
    mantra: str


class ChakraReading(BaseModel):
    """チャクラ診断の結果"""
    chakras: List[ChakraState]
    dominant_chakra: str
    blocked_chakras: List[str]
    kundalini: Kundalini
    overall_balance: OverallBalance
    healing_practices: List[HealingPractice]
    weekly_schedule: Dict[str, str]
    focus_chakra: str
    affirmation: str
    guidance: str
    core_meaning: str


def balance_for(openness: float, personal: float) -> str:
    if openness < 20:
        return 'blocked'
    if openness < 40:
        return 'underactive'
    if openness > 80:
        return 'overactive'
    if personal < 30 and openness < 50:
        return 'underactive'
    if personal > 70 and openness > 60:
        return 'overactive'
    return 'balanced'


def rotation_for(balance: str) -> str:
    if balance == 'blocked':
        return '停滞'
    if balance == 'underactive':
        return '反時計回り'
    return '時計回り'


class ChakraEngine(BaseDivinationEngine[ChakraReading]):
    """7つのチャクラの開き具合を診断するエンジン"""

    divination_type = 'chakra'

    def calculate(self) -> ChakraReading:
        seed = self.generate_seed(int(self.lunar_phase() * 1000))
        states = [self._diagnose(chakra) for chakra in CHAKRAS]
        logger.debug(f"chakra openness={[state.openness for state in states]}")

        dominant = max(states, key=lambda state: state.openness)
        blocked = [state for state in states if state.openness < 50]
        overall = self._overall_balance(states)
        focus = CHAKRAS[CATEGORY_FOCUS.get(self.category, min(states, key=self._imbalance_score).number) - 1]
        weakest = CHAKRAS[min(states, key=self._imbalance_score).number - 1]

        practices = [
            HealingPractice(
                chakra=CHAKRAS[state.number - 1]['name'],
                stones=CHAKRAS[state.number - 1]['stones'][:2],
                oils=CHAKRAS[state.number - 1]['oils'][:2],
                yoga=CHAKRAS[state.number - 1]['yoga'][:2],
                sound=CHAKRAS[state.number - 1]['sound'],
                mantra=CHAKRAS[state.number - 1]['mantra'],
            )
            for state in blocked
        ]

        guidance = (
            f"全体のバランススコアは{overall.score}です。{dominant.name}が最も活発に働いています。"
            f"{overall.root_cause}"
        )
        return ChakraReading(
            chakras=states,
            dominant_chakra=dominant.name,
            blocked_chakras=[state.name for state in blocked],
            kundalini=self._kundalini(states),
            overall_balance=overall,
            healing_practices=practices,
            weekly_schedule={
                day: f"{chakra['name']}：{chakra['color']}の服を身につけ、{chakra['stones'][0]}と共に{chakra['yoga'][0]}を30分"
                for day, chakra in zip(WEEKDAYS, CHAKRAS)
            },
            focus_chakra=focus['name'],
            affirmation=pick(weakest['affirmations'], seed),
            guidance=self.generate_personalized_message(guidance),
            core_meaning=(
                f"{dominant.name}（{'、'.join(CHAKRAS[dominant.number - 1]['keywords'][:2])}）の力が輝き、"
                f"{weakest['name']}の癒しが次の成長の鍵です。"
            ),
        )

    def _personal_energy(self, chakra: Dict) -> int:
        birth = self.input.birth_datetime()
        total = birth.day + birth.month + birth.year if birth else 0
        birth_number = total % 9 or 9
        return (birth_number * chakra['number'] + char_code_sum(self.input.full_name) % 100) % 100

    def _environmental_influence(self, chakra: Dict) -> float:
        if not self.environment:
            return 50
        influence = 50.0
        if chakra['element'] == 'water' and self.environment.lunar:
            influence += self.environment.lunar.phase * 20
        weather = self.environment.weather
        if weather:
            if chakra['element'] == 'fire' and weather.temperature > 25:
                influence += 10
            if chakra['element'] == 'water' and (weather.humidity or 0) > 70:
                influence += 10
        # 太陽神経叢は日中に高まる
        if chakra['number'] == 3 and 10 <= self.now().hour <= 14:
            influence += 15
        return min(100.0, max(0.0, influence))

    def _openness(self, chakra: Dict, personal: int, environmental: float) -> int:
        openness = 20 + personal * 0.5 + environmental * 0.3
        question = self.input.question or ''
        for number, keywords, boost in QUESTION_BOOSTS:
            if chakra['number'] == number and any(keyword in question for keyword in keywords):
                openness += boost
                break
        return round(min(100.0, max(0.0, openness)))

    def _diagnose(self, chakra: Dict) -> ChakraState:
        personal = self._personal_energy(chakra)
        openness = self._openness(chakra, personal, self._environmental_influence(chakra))
        balance = balance_for(openness, personal)
        if balance == 'balanced':
            symptoms = []
        elif balance == 'blocked':
            symptoms = chakra['imbalance']['blocked'] + chakra['imbalance']['underactive'][:2]
        else:
            symptoms = chakra['imbalance'][balance]
        return ChakraState(
            number=chakra['number'],
            name=chakra['name'],
            sanskrit=chakra['sanskrit'],
            color=chakra['color'],
            element=chakra['element'],
            openness=openness,
            balance=balance,
            balance_label=BALANCE_LABELS[balance],
            rotation=rotation_for(balance),
            vibration=round(chakra['frequency'] * (1 + (openness - 50) * 0.1 / 100)),
            energy_quality=ENERGY_QUALITY[balance],
            symptoms=symptoms,
        )

    @staticmethod
    def _imbalance_score(state: ChakraState) -> int:
        return 0 if state.balance == 'blocked' else state.openness

    def _kundalini(self, states: List[ChakraState]) -> Kundalini:
        root, crown = states[0], states[-1]
        awakened = root.openness > 60 and crown.openness > 50

        level = 1
        for state in states:
            if state.openness > 60 and state.balance != 'blocked':
                level = state.number
            else:
                break

        if awakened:
            activity = 'active'
        elif root.openness > 50:
            activity = 'rising' if level > 1 else 'stirring'
        else:
            activity = 'dormant'

        blockages = [state.number for state in states if state.balance == 'blocked']
        guidance = f"クンダリーニは{CHAKRAS[level - 1]['name']}まで{KUNDALINI_ACTIVITY[activity]}の状態です。"
        if blockages:
            guidance += f"まず{CHAKRAS[blockages[0] - 1]['name']}の詰まりを解放しましょう。"
        else:
            guidance += 'グラウンディングを保ちながら、ゆっくりと上昇を見守りましょう。'
        return Kundalini(
            awakened=awakened,
            current_level=level,
            activity=KUNDALINI_ACTIVITY[activity],
            blockages=blockages,
            guidance=guidance,
        )

    def _overall_balance(self, states: List[ChakraState]) -> OverallBalance:
        score = round(sum(state.openness for state in states) / len(states))
        primary = min(states, key=self._imbalance_score)

        lower = sum(1 for state in states[:3] if state.balance != 'balanced')
        upper = sum(1 for state in states[4:] if state.balance != 'balanced')
        if lower > upper:
            root_cause = '土台と安心感の課題が、全体のエネルギーの流れに影響しています。'
        elif upper > lower:
            root_cause = '霊的な自己とのつながりの弱さが、エネルギーの乱れを生んでいます。'
        elif primary.number == 4:
            root_cause = 'ハートの乱れが、与えることと受け取ることのバランスに影響しています。'
        else:
            root_cause = f"{CHAKRAS[primary.number - 1]['keywords'][0]}に関する課題がエネルギーを乱しています。"

        return OverallBalance(
            score=score,
            strengths=[f"{state.name}は力強く調和しています" for state in states
                       if state.balance == 'balanced' and state.openness > 60],
            weaknesses=[f"{state.name}に注意が必要です（{state.balance_label}）" for state in states
                        if state.balance != 'balanced' or state.openness < 40],
            primary_imbalance=f"{primary.name}（{primary.balance_label}）",
            root_cause=root_cause,
        )
