"""カバラ（生命の樹）エンジン"""
import logging
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel

from ..base import BaseDivinationEngine, sum_digits

logger = logging.getLogger(__name__)

SEPHIROTH = [
    {'number': 1, 'name': 'ケテル', 'meaning': '王冠', 'path': '統一', 'element': '純粋意識'},
    {'number': 2, 'name': 'コクマー', 'meaning': '知恵', 'path': '力', 'element': '原初の男性原理'},
    {'number': 3, 'name': 'ビナー', 'meaning': '理解', 'path': '形', 'element': '原初の女性原理'},
    {'number': 4, 'name': 'ケセド', 'meaning': '慈悲', 'path': '愛', 'element': '拡大'},
    {'number': 5, 'name': 'ゲブラー', 'meaning': '峻厳', 'path': '正義', 'element': '収縮'},
    {'number': 6, 'name': 'ティファレト', 'meaning': '美', 'path': '調和', 'element': '太陽'},
    {'number': 7, 'name': 'ネツァク', 'meaning': '勝利', 'path': '感情', 'element': '金星'},
    {'number': 8, 'name': 'ホド', 'meaning': '栄光', 'path': '知性', 'element': '水星'},
    {'number': 9, 'name': 'イェソド', 'meaning': '基礎', 'path': 'アストラル', 'element': '月'},
    {'number': 10, 'name': 'マルクト', 'meaning': '王国', 'path': '物質', 'element': '地球'},
]

# 慈悲の柱・峻厳の柱・均衡の柱
PILLARS = {
    '慈悲の柱': (2, 4, 7),
    '峻厳の柱': (3, 5, 8),
    '均衡の柱': (1, 6, 9, 10),
}

HEBREW_LETTERS = [
    {'letter': 'アレフ', 'value': 1, 'meaning': '牛', 'element': '風'},
    {'letter': 'ベート', 'value': 2, 'meaning': '家', 'element': '水星'},
    {'letter': 'ギメル', 'value': 3, 'meaning': 'ラクダ', 'element': '月'},
    {'letter': 'ダレット', 'value': 4, 'meaning': '扉', 'element': '金星'},
    {'letter': 'ヘー', 'value': 5, 'meaning': '窓', 'element': '牡羊座'},
    {'letter': 'ヴァヴ', 'value': 6, 'meaning': '釘', 'element': '牡牛座'},
    {'letter': 'ザイン', 'value': 7, 'meaning': '剣', 'element': '双子座'},
    {'letter': 'ヘット', 'value': 8, 'meaning': '柵', 'element': '蟹座'},
    {'letter': 'テット', 'value': 9, 'meaning': '蛇', 'element': '獅子座'},
    {'letter': 'ヨッド', 'value': 10, 'meaning': '手', 'element': '乙女座'},
    {'letter': 'カフ', 'value': 20, 'meaning': '手のひら', 'element': '木星'},
    {'letter': 'ラメド', 'value': 30, 'meaning': '牛追い棒', 'element': '天秤座'},
    {'letter': 'メム', 'value': 40, 'meaning': '水', 'element': '水'},
    {'letter': 'ヌン', 'value': 50, 'meaning': '魚', 'element': '蠍座'},
    {'letter': 'サメク', 'value': 60, 'meaning': '支え', 'element': '射手座'},
    {'letter': 'アイン', 'value': 70, 'meaning': '目', 'element': '山羊座'},
    {'letter': 'ペー', 'value': 80, 'meaning': '口', 'element': '火星'},
    {'letter': 'ツァディー', 'value': 90, 'meaning': '釣り針', 'element': '水瓶座'},
    {'letter': 'コフ', 'value': 100, 'meaning': '後頭部', 'element': '魚座'},
    {'letter': 'レーシュ', 'value': 200, 'meaning': '頭', 'element': '太陽'},
    {'letter': 'シン', 'value': 300, 'meaning': '歯', 'element': '火'},
    {'letter': 'タヴ', 'value': 400, 'meaning': '印', 'element': '土星'},
]

# 'a-b' はセフィラaとbを結ぶ小径
PATHS = {
    '1-2': {'name': '至高の王冠の小径', 'tarot': '愚者'},
    '1-3': {'name': '輝ける知性の小径', 'tarot': '魔術師'},
    '1-6': {'name': '統一の知性の小径', 'tarot': '女教皇'},
    '2-3': {'name': '照明の知性の小径', 'tarot': '女帝'},
    '2-4': {'name': '測定の知性の小径', 'tarot': '皇帝'},
    '2-6': {'name': '永遠の知性の小径', 'tarot': '教皇'},
    '3-5': {'name': '根源的知性の小径', 'tarot': '恋人'},
    '3-6': {'name': '影響の知性の小径', 'tarot': '戦車'},
    '4-5': {'name': '活動の知性の小径', 'tarot': '力'},
    '4-6': {'name': '意志の知性の小径', 'tarot': '隠者'},
    '4-7': {'name': '望みの知性の小径', 'tarot': '運命の輪'},
    '5-6': {'name': '均衡の知性の小径', 'tarot': '正義'},
    '5-8': {'name': '試練の知性の小径', 'tarot': '吊られた男'},
    '6-7': {'name': '配置の知性の小径', 'tarot': '死神'},
    '6-8': {'name': '実験の知性の小径', 'tarot': '節制'},
    '6-9': {'name': '更新の知性の小径', 'tarot': '悪魔'},
    '7-8': {'name': '感覚の知性の小径', 'tarot': '塔'},
    '7-9': {'name': '自然の知性の小径', 'tarot': '星'},
    '7-10': {'name': '体の知性の小径', 'tarot': '月'},
    '8-9': {'name': '完全な知性の小径', 'tarot': '太陽'},
    '8-10': {'name': '永続の知性の小径', 'tarot': '審判'},
    '9-10': {'name': '統括の知性の小径', 'tarot': '世界'},
}

FOUR_WORLDS = [
    {'name': 'アツィルト', 'meaning': '流出界', 'element': '火', 'level': '神性'},
    {'name': 'ブリアー', 'meaning': '創造界', 'element': '水', 'level': '大天使'},
    {'name': 'イェツィラー', 'meaning': '形成界', 'element': '風', 'level': '天使'},
    {'name': 'アッシャー', 'meaning': '活動界', 'element': '地', 'level': '物質'},
]

LIFE_LESSONS = {
    1: '純粋な統一意識に到達し、すべての二元性を超越することを学んでください。',
    2: '宇宙の知恵にアクセスし、創造的な力を正しく使うことを学んでください。',
    3: '深い理解と受容を通じて、形に生命を与えることを学んでください。',
    4: '無条件の愛と慈悲を持って、豊かさを分かち合うことを学んでください。',
    5: '正義と力を適切に使い、必要な境界を設定することを学んでください。',
    6: '美と調和の中心となり、対立する力をバランスさせることを学んでください。',
    7: '感情の勝利を通じて、創造的な表現を実現することを学んでください。',
    8: '知的な栄光を追求し、明晰な思考で真実を見出すことを学んでください。',
    9: 'アストラル界の基礎を固め、夢と現実を橋渡しすることを学んでください。',
    10: '物質世界で神性を体現し、天と地を結ぶことを学んでください。',
}

# ティクーン（魂の修正）の課題
LIFE_CHALLENGES = {
    1: '孤独感と分離感を克服し、すべてとの一体性を実感する必要があります。',
    2: '知恵の誤用や傲慢さに注意し、謙虚さを保つ必要があります。',
    3: '過度の制限や硬直性を避け、流れを受け入れる必要があります。',
    4: '寛大さと自己犠牲のバランスを保ち、境界を守る必要があります。',
    5: '過度の厳格さや批判を避け、慈悲を忘れない必要があります。',
    6: 'エゴの膨張を防ぎ、真の美と偽りの輝きを識別する必要があります。',
    7: '感情的な執着を手放し、より高い愛を表現する必要があります。',
    8: '知的な傲慢さを避け、心の知恵も大切にする必要があります。',
    9: '幻想と現実を区別し、グラウンディングを保つ必要があります。',
    10: '物質主義に陥らず、霊的な目的を忘れない必要があります。',
}

WORLD_ADVICE = {
    'アツィルト': '神性との直接的な繋がりを維持し、純粋な意図を保ってください。',
    'ブリアー': '創造的なビジョンを現実化し、大天使の導きを受け入れてください。',
    'イェツィラー': '感情と思考のバランスを保ち、天使的な調和を実現してください。',
    'アッシャー': '物質世界での使命を果たし、地に足をつけた霊性を体現してください。',
}

DIVINE_NAMES_72 = [
    'ヴェフ', 'ヨリ', 'シト', 'エレム', 'マハシ', 'レラヘ', 'アカ', 'カヘト',
    'ハジ', 'アラド', 'ラアヴ', 'ヘハ', 'イェゼ', 'メベヘ', 'ハリ', 'ハケム',
]

POWER_WORDS = ['YHVH', 'AHYH', 'AGLA', 'ADNI', 'ALHIM']

PROTECTION_PHRASES = [
    'ミカエルが右に、ガブリエルが左に、ウリエルが前に、ラファエルが後ろに',
    '神の光が私を包み、神の愛が私を守る',
    '私は生命の樹の中心に立ち、すべての世界と調和する',
]

VISUALIZATIONS = {
    1: '純白の輝く王冠があなたの頭上に浮かび、無限の光があなたを満たします。',
    2: '銀色の知恵の光があなたの右脳を活性化し、宇宙の秘密が明らかになります。',
    3: '深い藍色の理解の海があなたの左脳を満たし、すべてを包み込む母性が目覚めます。',
    4: '青い慈悲の光があなたの右肩から流れ、無限の愛が世界に広がります。',
    5: '赤い正義の炎があなたの左肩で燃え、必要な変革をもたらします。',
    6: '黄金の太陽があなたの心臓で輝き、すべてを調和させる美が放射されます。',
    7: '緑の勝利の光があなたの右腰で脈動し、感情的な成就がもたらされます。',
    8: 'オレンジの栄光があなたの左腰で振動し、明晰な知性が開花します。',
    9: '紫の月光があなたの丹田で輝き、創造的な基盤が確立されます。',
    10: '虹色の地球があなたの足元で回転し、物質世界での使命が明確になります。',
}

MANTRAS = {
    1: 'エヘイエー・アシェル・エヘイエー（私は在りて在る者）',
    2: 'ヤー（YH）',
    3: 'YHVH エロヒーム',
    4: 'エル',
    5: 'エロヒーム・ギボール',
    6: 'YHVH エロアー・ヴェダート',
    7: 'YHVH ツァバオト',
    8: 'エロヒーム・ツァバオト',
    9: 'シャダイ・エル・ハイ',
    10: 'アドナイ・ハアレツ',
}

PLANETARY_INFLUENCES = {
    'Sun': ' 太陽の時間はティファレトを活性化します。',
    'Moon': ' 月の時間はイェソドとの繋がりを強めます。',
    'Mercury': ' 水星の時間はホドの知的栄光を高めます。',
    'Venus': ' 金星の時間はネツァクの勝利をもたらします。',
    'Mars': ' 火星の時間はゲブラーの力を与えます。',
    'Jupiter': ' 木星の時間はケセドの慈悲を拡大します。',
    'Saturn': ' 土星の時間はビナーの理解を深めます。',
}


class LifePathSephira(BaseModel):
    sephira: Dict
    pillar: str
    lesson: str
    challenge: str


class SoulNumber(BaseModel):
    value: int
    hebrew_letters: List[Dict]
    meaning: str


class TreeOfLifePosition(BaseModel):
    current_sephira: Dict
    active_path: str
    path_name: str
    path_tarot: str
    guidance: str
    # 生命の道のセフィラと現在のセフィラを直接結ぶ小径（なければNone）
    connecting_path: Optional[str] = None


class FourWorlds(BaseModel):
    dominant_world: Dict
    balance: Dict[str, int]
    advice: str


class DivineNames(BaseModel):
    personal_name: str
    power_word: str
    protection: str


class KabbalisticMeditation(BaseModel):
    focus: str
    visualization: str
    mantra: str


class KabbalahReading(BaseModel):
    """カバラ占いの結果"""
    life_path_sephira: LifePathSephira
    soul_number: SoulNumber
    tree_of_life_position: TreeOfLifePosition
    pillar_balance: Dict[str, int]
    tikkun: str
    four_worlds: FourWorlds
    divine_names: DivineNames
    kabbalistic_meditation: KabbalisticMeditation
    personal_message: str
    mystical_insight: str
    core_meaning: str


def life_path_number(year: int, month: int, day: int) -> int:
    """年の各桁の和＋月＋日を10以下になるまで縮約（0はマルクト）"""
    total = sum_digits(year) + month + day
    while total > 10:
        total = sum_digits(total)
    return total or 10


def pillar_of(number: int) -> str:
    for pillar, members in PILLARS.items():
        if number in members:
            return pillar
    return '均衡の柱'


def path_between(a: int, b: int) -> Optional[str]:
    low, high = sorted((a, b))
    key = f"{low}-{high}"
    return key if key in PATHS else None


def soul_value(name: str) -> Tuple[int, List[Dict]]:
    """名前の簡易ゲマトリア。999を超えたら各桁の和に縮める"""
    total = 0
    used = []
    for char in name:
        letter = HEBREW_LETTERS[ord(char) % len(HEBREW_LETTERS)]
        total += letter['value']
        if letter not in used:
            used.append(letter)
    while total > 999:
        total = sum_digits(total)
    return total, used


class KabbalahEngine(BaseDivinationEngine[KabbalahReading]):
    """生命の樹・ヘブライ文字・四つの世界によるエンジン"""

    divination_type = 'kabbalah'

    def calculate(self) -> KabbalahReading:
        seed = self.generate_seed()
        life_path = self._life_path_sephira()
        soul = self._soul_number()
        position = self._tree_position(seed, life_path.sephira['number'])
        pillars = self._pillar_balance(life_path.sephira['number'], soul.value, position.current_sephira['number'])
        logger.debug(f"kabbalah life={life_path.sephira['name']} current={position.current_sephira['name']}")

        core = (
            f"{life_path.sephira['name']}（{life_path.sephira['meaning']}）の道を歩むあなたは、"
            f"{life_path.lesson}"
        )
        return KabbalahReading(
            life_path_sephira=life_path,
            soul_number=soul,
            tree_of_life_position=position,
            pillar_balance=pillars,
            tikkun=f"ティクーン（魂の修正）：{life_path.challenge}",
            four_worlds=self._four_worlds(seed),
            divine_names=DivineNames(
                personal_name=DIVINE_NAMES_72[seed % len(DIVINE_NAMES_72)],
                power_word=POWER_WORDS[(seed * 2) % len(POWER_WORDS)],
                protection=PROTECTION_PHRASES[(seed * 3) % len(PROTECTION_PHRASES)],
            ),
            kabbalistic_meditation=self._meditation(life_path.sephira),
            personal_message=self._personal_message(life_path, soul),
            mystical_insight=self._mystical_insight(),
            core_meaning=core,
        )

    def _life_path_sephira(self) -> LifePathSephira:
        birth = self.input.birth_datetime()
        number = life_path_number(birth.year, birth.month, birth.day) if birth else 10
        sephira = SEPHIROTH[number - 1]
        return LifePathSephira(
            sephira=sephira,
            pillar=pillar_of(number),
            lesson=LIFE_LESSONS[number],
            challenge=LIFE_CHALLENGES[number],
        )

    def _soul_number(self) -> SoulNumber:
        value, letters = soul_value(self.input.full_name)
        meaning = f"あなたの魂の数は{value}です。"
        if 0 < value < 10:
            meaning += f"これは{SEPHIROTH[value - 1]['name']}のエネルギーと共鳴します。"
        elif value < 10:
            meaning += 'これは神秘的なエネルギーと共鳴します。'
        elif value < 100:
            meaning += 'これは二桁の力強い振動を持ち、変容の可能性を示しています。'
        else:
            meaning += 'これは三桁の完成された振動を持ち、高次の使命を示しています。'
        if letters:
            meaning += (
                f"特に{letters[0]['letter']}（{letters[0]['meaning']}）の影響が強く、"
                f"{letters[0]['element']}の性質があなたの魂に刻まれています。"
            )
        return SoulNumber(value=value, hebrew_letters=letters[:3], meaning=meaning)

    def _tree_position(self, seed: int, life_number: int) -> TreeOfLifePosition:
        current = SEPHIROTH[(seed + self.now().day) % len(SEPHIROTH)]
        keys = list(PATHS)
        key = keys[seed % len(keys)]
        path = PATHS[key]
        guidance = (
            f"現在、あなたは{current['name']}（{current['meaning']}）にいます。"
            f"{path['name']}を通じて、{path['tarot']}のエネルギーが流れています。"
            f"{current['path']}の道を歩みながら、{current['element']}の本質を体現してください。"
        )
        return TreeOfLifePosition(
            current_sephira=current,
            active_path=key,
            path_name=path['name'],
            path_tarot=path['tarot'],
            guidance=guidance,
            connecting_path=path_between(life_number, current['number']),
        )

    def _pillar_balance(self, *numbers: int) -> Dict[str, int]:
        counts = {pillar: 0 for pillar in PILLARS}
        for number in numbers:
            if 1 <= number <= 10:
                counts[pillar_of(number)] += 1
        return counts

    def _four_worlds(self, seed: int) -> FourWorlds:
        birth = self.input.birth_datetime()
        if birth:
            factors = [birth.year % 100, birth.month, birth.day, seed % 100]
        else:
            factors = [0, 0, 0, seed % 100]
        raw = {world['name']: 25 + factor % 25 for world, factor in zip(FOUR_WORLDS, factors)}
        total = sum(raw.values())
        balance = {name: round(value / total * 100) for name, value in raw.items()}

        dominant_name = max(balance, key=lambda name: balance[name])
        dominant = next(world for world in FOUR_WORLDS if world['name'] == dominant_name)
        advice = f"あなたは主に{dominant['name']}（{dominant['meaning']}）で活動しています。{WORLD_ADVICE[dominant_name]}"
        weakest = min(balance, key=lambda name: balance[name])
        if balance[weakest] < 15:
            advice += f"また、{weakest}のエネルギーが不足しています。この世界との繋がりを強化してください。"
        return FourWorlds(dominant_world=dominant, balance=balance, advice=advice)

    def _meditation(self, sephira: Dict) -> KabbalisticMeditation:
        return KabbalisticMeditation(
            focus=f"{sephira['name']}の球体に意識を集中させ、{sephira['element']}のエネルギーを感じてください。",
            visualization=VISUALIZATIONS[sephira['number']],
            mantra=MANTRAS[sephira['number']],
        )

    def _personal_message(self, life_path: LifePathSephira, soul: SoulNumber) -> str:
        sephira = life_path.sephira
        if not self.input.question:
            return f"{sephira['name']}の道を歩むあなたは、{life_path.lesson}魂の数{soul.value}が示すように、{soul.meaning}"

        first_letter = soul.hebrew_letters[0]['meaning'] if soul.hebrew_letters else '愛'
        messages = {
            '恋愛・結婚': f"愛は{sephira['path']}の道で見つかります。相手との魂の契約を思い出し、{first_letter}の本質を体現してください。",
            '仕事・転職': f"{sephira['meaning']}のエネルギーを仕事に活かし、{soul.value}の振動と調和する職業を選んでください。",
            '金運・財運': f"物質的豊かさは{sephira['element']}のバランスから生まれます。マルクト（物質界）とケテル（精神界）を結んでください。",
            '健康': f"{sephira['name']}に対応する身体部位に注意し、生命の樹全体のエネルギーバランスを保ってください。",
            '総合運': f"あなたの魂の青写真は明確です。{life_path.lesson}これが今生の使命です。",
        }
        return f"「{self.input.question}」についてのカバラの啓示：" + messages.get(self.category, messages['総合運'])

    def _mystical_insight(self) -> str:
        if not self.environment or not self.environment.lunar:
            return '神聖な知恵の門は常に開かれています。静寂の中で耳を傾けてください。'

        phase = self.environment.lunar.phase
        insight = 'シェキナー（神の臨在）からのメッセージ：'
        if phase < 0.25:
            insight += '新月の闇はビナー（理解）の深淵を映し出します。隠された知恵が明らかになる時です。'
        elif phase < 0.5:
            insight += '月が満ちるようにあなたのケセド（慈悲）も拡大しています。与えることで受け取ります。'
        elif phase < 0.75:
            insight += '満月の光はティファレト（美）を照らします。内なる太陽と外なる月が調和します。'
        else:
            insight += '月が欠けるようにゲブラー（峻厳）が不要なものを切り離します。浄化と解放の時です。'

        ruler = 'Sun'
        if self.environment.planetary and self.environment.planetary.hour_ruler:
            ruler = self.environment.planetary.hour_ruler
        return insight + PLANETARY_INFLUENCES.get(ruler, '')
