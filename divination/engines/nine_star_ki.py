"""九星気学エンジン"""
import logging
from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel

from ..base import BaseDivinationEngine

logger = logging.getLogger(__name__)

NINE_STARS = {
    1: {'name': '一白水星', 'element': '水', 'color': '白', 'nature': '柔軟性・適応力', 'direction': '北'},
    2: {'name': '二黒土星', 'element': '土', 'color': '黒', 'nature': '母性・育成', 'direction': '南西'},
    3: {'name': '三碧木星', 'element': '木', 'color': '碧', 'nature': '発展・躍動', 'direction': '東'},
    4: {'name': '四緑木星', 'element': '木', 'color': '緑', 'nature': '調和・信頼', 'direction': '東南'},
    5: {'name': '五黄土星', 'element': '土', 'color': '黄', 'nature': '中心・支配', 'direction': '中央'},
    6: {'name': '六白金星', 'element': '金', 'color': '白', 'nature': '完璧・権威', 'direction': '北西'},
    7: {'name': '七赤金星', 'element': '金', 'color': '赤', 'nature': '楽観・社交', 'direction': '西'},
    8: {'name': '八白土星', 'element': '土', 'color': '白', 'nature': '変革・蓄積', 'direction': '北東'},
    9: {'name': '九紫火星', 'element': '火', 'color': '紫', 'nature': '情熱・華麗', 'direction': '南'},
}

# 五行の相生（good）と相剋（bad）
ELEMENT_COMPATIBILITY = {
    '木': {'good': ['水', '火'], 'bad': ['金']},
    '火': {'good': ['木', '土'], 'bad': ['水']},
    '土': {'good': ['火', '金'], 'bad': ['木']},
    '金': {'good': ['土', '水'], 'bad': ['火']},
    '水': {'good': ['金', '木'], 'bad': ['土']},
}

# 立春の日時（日本標準時）
SPRING_BEGINNINGS = {
    2020: datetime(2020, 2, 4, 17, 3),
    2021: datetime(2021, 2, 3, 22, 59),
    2022: datetime(2022, 2, 4, 4, 51),
    2023: datetime(2023, 2, 4, 10, 43),
    2024: datetime(2024, 2, 4, 16, 27),
    2025: datetime(2025, 2, 3, 22, 10),
    2026: datetime(2026, 2, 4, 4, 1),
    2027: datetime(2027, 2, 4, 9, 46),
    2028: datetime(2028, 2, 4, 15, 31),
    2029: datetime(2029, 2, 3, 21, 20),
    2030: datetime(2030, 2, 4, 3, 9),
}

CHARACTERISTICS = {
    1: ['柔軟性がある', '適応力が高い', '思慮深い', '内向的', '慎重'],
    2: ['母性的', '世話好き', '堅実', '保守的', '忍耐強い'],
    3: ['積極的', '行動的', '楽観的', '直感的', '新しもの好き'],
    4: ['穏やか', '協調的', '信頼できる', '几帳面', '優柔不断'],
    5: ['リーダー気質', '支配的', '自信家', '頑固', '中心的存在'],
    6: ['完璧主義', '責任感が強い', '正義感がある', '威厳がある', 'プライドが高い'],
    7: ['社交的', '楽観的', '話上手', '享楽的', '気分屋'],
    8: ['変革を好む', '目標志向', '現実的', '蓄財上手', '慎重'],
    9: ['情熱的', '華やか', '直感的', '芸術的', '気が短い'],
}

STRENGTHS = {
    1: ['環境適応能力', '柔軟な思考', '協調性', '洞察力'],
    2: ['面倒見の良さ', '堅実さ', '忍耐力', '育成能力'],
    3: ['行動力', '開拓精神', '明るさ', '発想力'],
    4: ['信頼性', '調和能力', '計画性', '継続力'],
    5: ['統率力', '決断力', '影響力', '安定感'],
    6: ['責任感', '組織力', '正確性', '権威性'],
    7: ['コミュニケーション能力', '楽天性', '人脈', '説得力'],
    8: ['目標達成力', '改革力', '経済観念', '粘り強さ'],
    9: ['情熱', '創造性', '魅力', '直感力'],
}

WEAKNESSES = {
    1: ['優柔不断', '流されやすい', '内向的すぎる', '心配性'],
    2: ['変化を嫌う', 'くよくよしやすい', '執着心', '受け身'],
    3: ['短気', '飽きっぽい', '計画性不足', '軽率'],
    4: ['優柔不断', '八方美人', '心配性', '決断力不足'],
    5: ['頑固', '傲慢', '融通が利かない', '支配的'],
    6: ['完璧主義すぎる', '批判的', '柔軟性不足', '孤立しやすい'],
    7: ['浪費癖', '飽きっぽい', '表面的', '無責任'],
    8: ['頑固', '変化を恐れる', '物質主義', '疑い深い'],
    9: ['短気', '感情的', '派手好き', '持続力不足'],
}

MONTHLY_INFLUENCE = {
    1: '内省と計画の月。新しいアイデアを温める時期',
    2: '基盤作りの月。地道な努力が実を結ぶ',
    3: '活動的な月。新しいことを始めるのに最適',
    4: '人間関係の月。信頼関係を築く好機',
    5: '中心となる月。リーダーシップを発揮する時',
    6: '完成の月。これまでの努力が形になる',
    7: '収穫の月。成果を楽しみ、次に備える',
    8: '変化の月。新旧交代、方向転換の時期',
    9: '華やかな月。注目を集め、表現する時',
}

DAILY_INFLUENCE = {
    1: '柔軟に対応する日。流れに身を任せて',
    2: 'サポートに徹する日。他者を支える',
    3: '積極的に動く日。チャンスを掴む',
    4: '信頼を築く日。約束を大切に',
    5: '中心に立つ日。決断を下す',
    6: '責任を果たす日。完璧を目指す',
    7: '楽しむ日。人との交流を大切に',
    8: '見直す日。改善点を探る',
    9: '輝く日。自己表現を大切に',
}

AUSPICIOUS_DIRECTIONS = {
    1: ['東', '東南', '南'],
    2: ['北', '南', '西'],
    3: ['北', '南', '東南'],
    4: ['北', '東', '南'],
    5: ['北東', '南西', '北西', '東南'],
    6: ['北', '東', '南西'],
    7: ['東', '東南', '北西'],
    8: ['南', '西', '北西'],
    9: ['東', '北', '東南'],
}

INAUSPICIOUS_DIRECTIONS = {
    1: ['南西', '北東'],
    2: ['東', '東南'],
    3: ['西', '北西'],
    4: ['南西', '北西'],
    5: ['すべて注意'],
    6: ['南', '東南'],
    7: ['北', '北東'],
    8: ['東', '北東'],
    9: ['西', '南西'],
}

YEARLY_FORTUNES = {
    1: {'overall': '新しい始まりの年。種をまく時期', 'career': '新規プロジェクトの立ち上げに最適',
        'relationships': '新しい出会いが期待できる', 'health': '体調管理を怠らないように', 'timing': '春から夏にかけて運気上昇'},
    2: {'overall': '準備と基盤作りの年', 'career': '地道な努力が必要な時期',
        'relationships': '既存の関係を深める', 'health': '無理は禁物、休養も大切', 'timing': '秋から冬が充実期'},
    3: {'overall': '発展と成長の年', 'career': '積極的な行動が吉',
        'relationships': '社交的になれる時期', 'health': '活動的で健康的', 'timing': '年間を通じて好調'},
    4: {'overall': '安定と信頼構築の年', 'career': '信用を積み重ねる',
        'relationships': '長期的な関係を築く', 'health': 'ストレス管理が重要', 'timing': '夏が最も良い時期'},
    5: {'overall': '転換と変革の年', 'career': '大きな決断の時',
        'relationships': '関係の見直し時期', 'health': '体調の変化に注意', 'timing': '変化は避けられない'},
    6: {'overall': '完成と達成の年', 'career': 'これまでの努力が実る',
        'relationships': '関係が深まる', 'health': '健康状態良好', 'timing': '秋が収穫の時期'},
    7: {'overall': '収穫と楽しみの年', 'career': '成果を享受する時',
        'relationships': '楽しい交流が増える', 'health': '楽観的で健康的', 'timing': '年末に向けて上昇'},
    8: {'overall': '見直しと改革の年', 'career': '方向転換の好機',
        'relationships': '関係の整理時期', 'health': '健康診断を受ける', 'timing': '春に大きな変化'},
    9: {'overall': '完結と新たな準備の年', 'career': '総括と次への準備',
        'relationships': '縁の整理と新しい出会い', 'health': '心身のリセット必要', 'timing': '年の後半が重要'},
}

LOVE_ADVICE = {
    1: '相手の気持ちに寄り添い、柔軟に対応することが大切',
    2: '献身的な愛情で相手を包み込みましょう',
    3: '積極的にアプローチし、明るく接することが吉',
    4: '信頼関係を大切に、誠実な態度で',
    5: 'リードする立場で関係を築いていく',
    6: '理想を追求しすぎず、相手を受け入れる',
    7: '楽しい時間を共有し、会話を大切に',
    8: '変化を恐れず、新しい関係性を模索',
    9: '情熱的に、でも相手のペースも尊重して',
}

CAREER_ADVICE = {
    1: '状況に応じて柔軟に対応し、サポート役として活躍',
    2: '堅実に仕事を進め、信頼を積み重ねる',
    3: '新しいプロジェクトに積極的に参加する',
    4: 'チームワークを大切に、調整役として活躍',
    5: 'リーダーシップを発揮し、全体を統括',
    6: '完璧を目指し、責任を持って取り組む',
    7: 'コミュニケーションを活かし、人脈を広げる',
    8: '改革や改善に取り組み、新しい価値を創造',
    9: '創造性を発揮し、注目を集める仕事を',
}

WEALTH_ADVICE = {
    1: '流動的な資産運用で柔軟に対応',
    2: '堅実な貯蓄と安定した投資を心がける',
    3: '新しい収入源を積極的に開拓',
    4: '信頼できる人のアドバイスを参考に',
    5: '大きな決断は慎重に、でも勇気を持って',
    6: '計画的な資産管理で着実に増やす',
    7: '楽しみながらも浪費には注意',
    8: '投資の見直しと新しい運用方法を検討',
    9: '直感を信じつつ、派手な投資は控えめに',
}

HEALTH_FOCUS = {
    1: '腎臓・膀胱・水分代謝に注意',
    2: '胃腸・消化器系を大切に',
    3: '肝臓・神経系のケアを',
    4: '呼吸器系・アレルギーに注意',
    5: '全身のバランスを整える',
    6: '肺・大腸・呼吸を意識',
    7: '口腔・喉のケアを大切に',
    8: '関節・骨格系に注意',
    9: '心臓・血管系の健康管理',
}

# 天候を五行に対応させる（不明な天候は晴れ扱い）
WEATHER_ELEMENTS = {
    '晴れ': '火', 'clear': '火',
    '雨': '水', 'rain': '水',
    '曇り': '土', 'cloudy': '土',
    '雪': '水', 'snow': '水',
    '風': '木', 'wind': '木',
}


class MainStar(BaseModel):
    number: int
    name: str
    element: str
    characteristics: List[str]
    strengths: List[str]
    weaknesses: List[str]
    adjusted_year: int
    spring_beginning: datetime
    # 2月4日固定で計算した場合の本命星
    traditional_number: int


class CycleStar(BaseModel):
    number: int
    name: str
    influence: str


class DirectionFortune(BaseModel):
    auspicious: List[str]
    inauspicious: List[str]
    best_direction: str
    avoid_direction: str


class YearlyFortune(BaseModel):
    overall: str
    career: str
    relationships: str
    health: str
    timing: str


class StarCompatibility(BaseModel):
    excellent_with: List[int]
    good_with: List[int]
    challenging_with: List[int]


class NineStarReading(BaseModel):
    """九星気学の結果"""
    main_star: MainStar
    monthly_star: CycleStar
    daily_star: CycleStar
    direction_fortune: DirectionFortune
    yearly_fortune: YearlyFortune
    compatibility: StarCompatibility
    personal_guidance: str
    environmental_harmony: str
    core_meaning: str


def star_for_year(year: int) -> int:
    number = 11 - year % 9
    if number > 9:
        number -= 9
    return number or 9


def spring_beginning(year: int) -> datetime:
    """立春の日時。表にない年は2月4日10時とみなす"""
    return SPRING_BEGINNINGS.get(year, datetime(year, 2, 4, 10, 0))


def adjusted_year(birth: datetime) -> int:
    """立春より前に生まれた人は前年の星になる"""
    return birth.year - 1 if birth < spring_beginning(birth.year) else birth.year


def monthly_star_number(year: int, month: int) -> int:
    return (year * 12 + month) % 9 or 9


def daily_star_number(day_of_year: int) -> int:
    return day_of_year % 9 or 9


def compatibility_for(number: int) -> StarCompatibility:
    relation = ELEMENT_COMPATIBILITY[NINE_STARS[number]['element']]
    excellent, good, challenging = [], [], []
    for other, star in NINE_STARS.items():
        if other == number:
            continue
        if star['element'] in relation['good']:
            excellent.append(other)
        elif star['element'] in relation['bad']:
            challenging.append(other)
        else:
            good.append(other)
    return StarCompatibility(excellent_with=excellent, good_with=good, challenging_with=challenging)


class NineStarKiEngine(BaseDivinationEngine[NineStarReading]):
    """本命星・月命星・日命星による九星気学エンジン"""

    divination_type = 'nine-star-ki'

    def calculate(self) -> NineStarReading:
        main = self._main_star()
        now = self.now()
        monthly_number = monthly_star_number(now.year, now.month)
        daily_number = daily_star_number(now.timetuple().tm_yday)
        monthly = CycleStar(number=monthly_number, name=NINE_STARS[monthly_number]['name'],
                            influence=MONTHLY_INFLUENCE[monthly_number])
        daily = CycleStar(number=daily_number, name=NINE_STARS[daily_number]['name'],
                          influence=DAILY_INFLUENCE[daily_number])
        logger.debug(f"nine-star-ki main={main.number} monthly={monthly_number} daily={daily_number}")

        auspicious = AUSPICIOUS_DIRECTIONS[main.number]
        inauspicious = INAUSPICIOUS_DIRECTIONS[main.number]
        return NineStarReading(
            main_star=main,
            monthly_star=monthly,
            daily_star=daily,
            direction_fortune=DirectionFortune(
                auspicious=auspicious,
                inauspicious=inauspicious,
                best_direction=auspicious[0],
                avoid_direction=inauspicious[0],
            ),
            yearly_fortune=YearlyFortune(**YEARLY_FORTUNES[(now.year + main.number) % 9 or 9]),
            compatibility=compatibility_for(main.number),
            personal_guidance=self._guidance(main, monthly, daily),
            environmental_harmony=self._environmental_harmony(main.element),
            core_meaning=f"{main.name}（{NINE_STARS[main.number]['nature']}）の気を持つあなたは、{main.characteristics[0]}な人です。",
        )

    def _main_star(self) -> MainStar:
        birth: Optional[datetime] = self.input.birth_datetime()
        if birth is None:
            # 無効な日付は現在を基準にする
            birth = self.now().replace(tzinfo=None)
        year = adjusted_year(birth)
        number = star_for_year(year)
        traditional_year = birth.year - 1 if (birth.month, birth.day) < (2, 4) else birth.year
        return MainStar(
            number=number,
            name=NINE_STARS[number]['name'],
            element=NINE_STARS[number]['element'],
            characteristics=CHARACTERISTICS[number],
            strengths=STRENGTHS[number],
            weaknesses=WEAKNESSES[number],
            adjusted_year=year,
            spring_beginning=spring_beginning(birth.year),
            traditional_number=star_for_year(traditional_year),
        )

    def _guidance(self, main: MainStar, monthly: CycleStar, daily: CycleStar) -> str:
        if not self.input.question:
            return f"{main.name}のあなたは、{'、'.join(main.characteristics)}という特性を活かして人生を歩んでください。"

        advice = {
            '恋愛・結婚': f"{LOVE_ADVICE[main.number]}。今月は{monthly.name}の影響で、{monthly.influence}",
            '仕事・転職': f"{CAREER_ADVICE[main.number]}。現在の運気は仕事面で{monthly.influence}",
            '金運・財運': WEALTH_ADVICE[main.number],
            '健康': f"{HEALTH_FOCUS[main.number]}。本日は{daily.name}の日なので、{daily.influence}",
            '総合運': (
                f"{main.name}の特性を活かし、今月の{monthly.name}のエネルギーと、"
                f"本日の{daily.name}の流れに乗って行動することが成功の鍵です。"
            ),
        }
        return f"「{self.input.question}」について、" + advice.get(self.category, advice['総合運'])

    def _environmental_harmony(self, element: str) -> str:
        if not self.environment:
            return ''
        weather = self.environment.weather
        condition = weather.condition.lower() if weather else ''
        weather_element = WEATHER_ELEMENTS.get(condition, '火')
        relation = ELEMENT_COMPATIBILITY[element]

        harmony = '環境との調和：'
        if weather_element in relation['good']:
            harmony += f"現在の天候はあなたの{element}の気と調和し、運気を高めています。"
        elif weather_element in relation['bad']:
            harmony += f"現在の天候はあなたの{element}の気と相克関係にあるため、慎重な行動を。"
        else:
            harmony += '現在の天候とあなたの気は中立的な関係です。'

        if weather:
            if weather.temperature > 25:
                if element == '火':
                    harmony += '暑さがあなたのエネルギーを増幅させます。'
                elif element == '水':
                    harmony += '暑さで消耗しやすいので、休息を大切に。'
            elif weather.temperature < 10:
                if element == '水':
                    harmony += '寒さがあなたの本質と調和します。'
                elif element == '火':
                    harmony += '寒さで活力が低下しやすいので、温かく過ごして。'
        return harmony
