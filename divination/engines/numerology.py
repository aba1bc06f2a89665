"""数秘術エンジン"""
import logging
from typing import Dict, List

from pydantic import BaseModel

from ..base import BaseDivinationEngine, reduce_number, sum_digits
from ..interpretation import pick
from ..seed import lcg_random

logger = logging.getLogger(__name__)

VOWELS = set('あいうえおアイウエオaeiouAEIOU')

LIFE_PATH_MEANINGS = {
    1: ['独立心と創造性に富むリーダー。新しい道を切り開く先駆者',
        '革新的なアイデアで世界を変える開拓者',
        '自己の信念を貫く強い意志の持ち主',
        '独創的な視点で新たな価値を生み出す創造者'],
    2: ['調和と協力を重んじる平和主義者。人々を結びつける架け橋',
        '繊細な感性で他者の心を理解する共感者',
        'バランスと調和を大切にする調停者',
        'パートナーシップを通じて成功する協力者'],
    3: ['創造性と表現力に溢れる芸術家。喜びと楽観性を周囲に広げる',
        '言葉と芸術で世界を彩るクリエイター',
        'ポジティブなエネルギーで周囲を照らす太陽',
        '豊かな想像力で夢を現実にする魔法使い'],
    4: ['堅実で信頼できる建設者。安定と秩序をもたらす',
        '着実な努力で確かな成果を築く実践者',
        '計画性と忍耐力で目標を達成する建築家',
        '伝統と革新のバランスを保つ守護者'],
    5: ['自由と冒険を愛する探求者。変化と多様性を楽しむ',
        '好奇心旺盛で新しい体験を求める冒険家',
        '変化を恐れず進化し続ける変革者',
        '多彩な才能で人生を豊かにする万能者'],
    6: ['愛と責任感に満ちた養育者。調和と美を大切にする',
        '深い愛情で他者を包み込む母なる存在',
        '美と調和を生活に取り入れる芸術的な魂',
        '家族と共同体の幸せを守る守護天使'],
    7: ['深い洞察力を持つ探求者。真理と知恵を追求する',
        '内なる声に耳を傾ける神秘的な賢者',
        '哲学と精神性を探求する思想家',
        '直感と分析力を併せ持つ真理の探求者'],
    8: ['物質的成功と権力を扱う実業家。現実世界での達成を重視',
        'ビジネスセンスと実行力で成功を掴む起業家',
        '資源を賢く活用して豊かさを創造する錬金術師',
        '権力と責任のバランスを理解する指導者'],
    9: ['普遍的な愛と奉仕の人。人類全体の幸福を願う',
        '無私の愛で世界に貢献する博愛主義者',
        '古い魂を持ち、深い知恵を分かち合う教師',
        '全ての生命との繋がりを感じる宇宙的な存在'],
    11: ['直感とインスピレーションの使者。高い精神性を持つ',
         '霊的な洞察力で他者を導く光の使者',
         '理想と現実の架け橋となる啓発者',
         '宇宙の真理を地上にもたらすメッセンジャー'],
    22: ['マスタービルダー。大きなビジョンを現実化する力を持つ',
         '壮大な夢を具現化する建設的な理想主義者',
         '実践的な知恵で世界に貢献する改革者',
         '物質と精神を統合する偉大な建築家'],
    33: ['マスターティーチャー。無条件の愛と奉仕を体現する',
         '純粋な愛で全てを包み込む慈愛の化身',
         '人類の意識を高める精神的指導者',
         '自己犠牲的な愛で世界を癒すヒーラー'],
}

NUMBER_KEYWORDS = {
    0: '無限の可能性',
    1: '新しい始まり', 2: '協調と調和', 3: '創造と表現', 4: '安定と基盤',
    5: '変化と自由', 6: '愛と責任', 7: '内省と探求', 8: '成功と達成', 9: '完成と奉仕',
    11: '直感と啓示', 22: '大いなる実現', 33: '無条件の愛',
}

CYCLE_ADVICE = {
    1: '基礎を築く時期。自己発見と方向性の確立が重要',
    2: '成長と拡大の時期。人間関係と協力が鍵',
    3: '実現と収穫の時期。これまでの努力が実を結ぶ',
    4: '統合と成熟の時期。経験を活かして他者を導く',
}

ADVICE = {
    1: '新しいプロジェクトを始める時期です',
    2: 'パートナーシップと協力が重要です',
    3: '創造性と表現力を活かす時です',
    4: '計画的に基盤を固める段階です',
    5: '変化と新しい経験を受け入れる時です',
    6: '愛と責任を大切にする時期です',
    7: '内省と精神的成長に向かう時です',
    8: '目標達成への具体的行動の時です',
    9: '奉仕と貢献を通じて成長する時です',
}

COMPATIBILITY = {
    1: ([3, 5, 7], [4, 6]),
    2: ([4, 6, 8], [1, 5]),
    3: ([1, 5, 9], [4, 7]),
    4: ([2, 6, 8], [3, 5]),
    5: ([1, 3, 7], [2, 4]),
    6: ([2, 4, 9], [1, 5]),
    7: ([1, 5, 7], [3, 8]),
    8: ([2, 4, 6], [7, 9]),
    9: ([3, 6, 9], [4, 8]),
    11: ([2, 22, 33], [1, 8]),
    22: ([4, 11, 33], [5, 7]),
    33: ([6, 11, 22], [3, 8]),
}

KARMIC_DEBT = {
    13: '怠惰のカルマ。地道な努力と忍耐で乗り越えます',
    14: '自由の乱用のカルマ。節度と自己管理が課題です',
    16: 'エゴのカルマ。謙虚さと精神的な再生が求められます',
    19: '権力の乱用のカルマ。自立と他者への配慮を両立させます',
}

TIME_ELEMENTS = {
    'morning': ['朝の新鮮なエネルギーが', '朝日と共に', '新しい一日の始まりに', '朝の清々しい気持ちで'],
    'afternoon': ['午後の充実した時間に', '日中の活発なエネルギーで', '昼の明るい光の中で', '活動的な午後に'],
    'evening': ['夕暮れの穏やかな時に', '一日の実りを感じながら', '夕方の落ち着いた時間に', '黄昏時の美しさと共に'],
    'night': ['夜の静寂の中で', '星々の導きにより', '深夜の神秘的な時に', '月明かりの下で'],
}

MOON_ELEMENTS = {
    'new': ['新たなサイクルが始まり', '種まきの時期に', '可能性が芽生え', '新月のパワーで'],
    'waxing': ['成長のエネルギーに満ちて', '力が増していく時期に', '上昇気流に乗って', '発展の波に乗り'],
    'full': ['満月の完成したエネルギーで', '最高潮の運気で', '満ち足りた状態で', '豊かさが溢れ'],
    'waning': ['手放しと浄化の時期に', '内なる智慧が深まり', '整理整頓の好機に', '本質が見えてきて'],
}

OUTCOMES = [
    '素晴らしい出来事が待っています',
    '幸運の扉が開かれます',
    '願いが実現に向かいます',
    '新しいチャンスが訪れます',
    '喜びに満ちた瞬間が来ます',
    '期待以上の結果が得られます',
    '幸せな驚きがあるでしょう',
    'ポジティブな変化が起こります',
    '運命的な出会いがありそうです',
    '思いがけない幸運が舞い込みます',
    '心が満たされる体験ができます',
    '成功への道が開かれます',
    '愛と豊かさに包まれます',
    '直感が冴え渡る一日になります',
    '全てがうまく進む流れです',
]


class NumerologyInterpretation(BaseModel):
    life_path_meaning: str
    destiny_meaning: str
    soul_meaning: str
    current_cycle: str
    advice: str


class Compatibility(BaseModel):
    best_numbers: List[int]
    challenging_numbers: List[int]


class NumerologyResult(BaseModel):
    """数秘術の結果"""
    life_path_number: int
    destiny_number: int
    soul_number: int
    personality_number: int
    maturity_number: int
    interpretation: NumerologyInterpretation
    compatibility: Compatibility
    todays_number: int
    lucky_numbers: List[int]
    # 3x3の数秘マトリクス
    matrix: Dict[str, int]
    karmic_numbers: List[int]
    karmic_lessons: Dict[int, str]
    personalized_message: str
    lucky_message: str
    core_meaning: str


class NumerologyEngine(BaseDivinationEngine[NumerologyResult]):
    """生年月日と名前から数秘を計算する"""

    divination_type = 'numerology'

    KARMIC_NUMBERS = (13, 14, 16, 19)

    def calculate(self) -> NumerologyResult:
        seed = self.generate_seed(int(self.lunar_phase() * 1000))
        life_path = self.get_birth_number()
        destiny = self.get_name_number()
        soul = self.calculate_soul_number()
        personality = self.calculate_personality_number()
        maturity = reduce_number(life_path + destiny)
        todays = self.calculate_todays_number()
        logger.debug(f"numerology life={life_path} destiny={destiny} soul={soul} today={todays}")

        interpretation = self._interpretation(life_path, destiny, soul, personality, seed)
        matrix = self._build_matrix(life_path, destiny, soul, personality, maturity)
        karmic = self._find_karmic_numbers()
        best, challenging = COMPATIBILITY.get(life_path, COMPATIBILITY[1])

        return NumerologyResult(
            life_path_number=life_path,
            destiny_number=destiny,
            soul_number=soul,
            personality_number=personality,
            maturity_number=maturity,
            interpretation=interpretation,
            compatibility=Compatibility(best_numbers=best, challenging_numbers=challenging),
            todays_number=todays,
            lucky_numbers=self._lucky_numbers(life_path, destiny),
            matrix=matrix,
            karmic_numbers=karmic,
            karmic_lessons={number: KARMIC_DEBT[number] for number in karmic},
            personalized_message=self.generate_personalized_message(interpretation.advice),
            lucky_message=self._lucky_message(todays, seed),
            core_meaning=f"ライフパスナンバー{life_path}：{interpretation.life_path_meaning}",
        )

    def _name_chars(self, vowels: bool) -> List[str]:
        return [
            char for char in self.input.full_name
            if not char.isspace() and (char in VOWELS) == vowels
        ]

    def _sum_chars(self, chars: List[str]) -> int:
        return sum(ord(char) % 9 + 1 for char in chars)

    def calculate_soul_number(self) -> int:
        """母音から計算するソウルナンバー"""
        return reduce_number(self._sum_chars(self._name_chars(vowels=True)), masters=(11, 22))

    def calculate_personality_number(self) -> int:
        """子音から計算するパーソナリティナンバー"""
        return reduce_number(self._sum_chars(self._name_chars(vowels=False)), masters=(11, 22))

    def calculate_todays_number(self) -> int:
        today = self.now()
        total = reduce_number(sum_digits(today.year) + sum_digits(today.month) + sum_digits(today.day), masters=())
        modifier = self.get_environmental_modifier() * self.get_time_modifier()
        return round(total * modifier) % 10 or 1

    def _interpretation(self, life_path: int, destiny: int, soul: int, personality: int,
                        seed: int) -> NumerologyInterpretation:
        meanings = LIFE_PATH_MEANINGS.get(life_path, LIFE_PATH_MEANINGS[1])
        birth = self.input.birth_datetime()
        age = self.now().year - birth.year if birth else 0
        cycle = max(age, 0) // 9 + 1
        total = (life_path + destiny + soul + personality) % 9 or 9
        return NumerologyInterpretation(
            life_path_meaning=pick(meanings, seed),
            destiny_meaning=f"運命数{destiny}があなたの人生の目的を示しています",
            soul_meaning=f"魂の数{soul}があなたの内なる願いを表しています",
            current_cycle=f"現在は第{cycle}サイクル。{CYCLE_ADVICE[min(cycle, 4)]}",
            advice=ADVICE[total],
        )

    def _build_matrix(self, life_path: int, destiny: int, soul: int, personality: int,
                      maturity: int) -> Dict[str, int]:
        """上段は生年月日、中段と下段は名前と人生の数"""
        birth = self.input.birth_datetime()
        day, month, year = (birth.day, birth.month, birth.year) if birth else (0, 0, 0)
        return {
            'top_left': reduce_number(day),
            'top_center': reduce_number(month),
            'top_right': reduce_number(sum_digits(year)),
            'middle_left': reduce_number(day + month),
            'center': life_path,
            'middle_right': destiny,
            'bottom_left': soul,
            'bottom_center': personality,
            'bottom_right': maturity,
        }

    def _find_karmic_numbers(self) -> List[int]:
        """縮約の途中に現れるカルミックナンバー"""
        birth = self.input.birth_datetime()
        candidates = [
            self._sum_chars(self._name_chars(vowels=True)),
            self._sum_chars(self._name_chars(vowels=False)),
        ]
        if birth:
            candidates += [
                birth.day,
                birth.day + birth.month,
                sum_digits(birth.year) + sum_digits(birth.month) + sum_digits(birth.day),
            ]
        found = set()
        for number in candidates:
            while number > 9:
                if number in self.KARMIC_NUMBERS:
                    found.add(number)
                number = sum_digits(number)
        return sorted(found)

    def _lucky_numbers(self, life_path: int, destiny: int) -> List[int]:
        today = self.now()
        moon = round(self.lunar_phase() * 9) or 9
        numbers = []
        for number in (life_path, destiny, today.day % 9 or 9, today.month % 9 or 9, moon):
            if number not in numbers:
                numbers.append(number)
        return numbers[:5]

    def _lucky_message(self, todays: int, seed: int) -> str:
        hour = self.now().hour
        if 5 <= hour < 12:
            period = 'morning'
        elif 12 <= hour < 17:
            period = 'afternoon'
        elif 17 <= hour < 21:
            period = 'evening'
        else:
            period = 'night'

        phase = self.lunar_phase()
        if phase < 0.25:
            moon = 'new'
        elif phase < 0.5:
            moon = 'waxing'
        elif phase < 0.75:
            moon = 'full'
        else:
            moon = 'waning'

        state, _ = lcg_random(seed)
        index = state % 1000
        return (
            f"{TIME_ELEMENTS[period][index % 4]}、{NUMBER_KEYWORDS.get(todays, '特別なエネルギー')}のエネルギーと"
            f"{MOON_ELEMENTS[moon][index % 4]}、{OUTCOMES[index % len(OUTCOMES)]}"
        )
