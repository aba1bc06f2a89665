"""アカシックレコード・リーディングエンジン"""
import hashlib
import logging
from typing import List

from pydantic import BaseModel

from ..base import BaseDivinationEngine, reduce_number, sum_digits
from ..interpretation import pick

logger = logging.getLogger(__name__)

SOUL_AGES = [
    ('young', '若い魂', '個人の力と成功の追求', ['野心的', '競争的', '独立心', '行動力']),
    ('mature', '成熟した魂', '感情の深さと人間関係の探求', ['内省的', '感情豊か', '他者理解', '複雑性']),
    ('old', '老練な魂', '精神性と宇宙的真理の追求', ['知恵', '超然', '精神的', '統合的視点']),
    ('ancient', '古の魂', '二元性を超えた存在としての奉仕', ['悟り', '無条件の愛', '一体感', '静けさ']),
]

SOUL_TYPES = [
    ('server', '奉仕と献身の魂'),
    ('artisan', '創造と表現の魂'),
    ('warrior', '行動と保護の魂'),
    ('scholar', '知識と理解の魂'),
    ('sage', '智慧と教えの魂'),
    ('priest', '癒しと導きの魂'),
    ('king', '統治と統合の魂'),
]

SOUL_ORIGINS = [
    'プレアデス星団 - 愛と美の探求者',
    'シリウス - 高度な知性と技術',
    'アンドロメダ - 自由と独立の精神',
    'アークトゥルス - 癒しと変容の力',
    'オリオン - 戦士と建設者',
    'リラ - 創造と芸術の源流',
    '金星 - 愛と調和の使者',
    '地球原生 - ガイアの子供',
]

PAST_LIVES = [
    {'era': 'アトランティス時代', 'location': 'アトランティス大陸', 'identity': 'クリスタルヒーラー',
     'theme': '力の責任', 'lesson': 'テクノロジーと霊性のバランス', 'talent': 'ヒーリング能力'},
    {'era': '古代エジプト', 'location': 'テーベ', 'identity': '神殿の書記',
     'theme': '神聖な知識の保護', 'lesson': '知識を分かち合うこと', 'talent': '神秘学への理解'},
    {'era': 'レムリア時代', 'location': 'レムリア大陸', 'identity': '自然と調和する存在',
     'theme': '地球との一体感', 'lesson': '理想を現実に根づかせること', 'talent': '自然や動物との交流'},
    {'era': '古代ギリシャ', 'location': 'アテネ', 'identity': '哲学者',
     'theme': '真理の探求', 'lesson': '頭と心の統合', 'talent': '論理的な思考'},
    {'era': '中世ヨーロッパ', 'location': '南フランスの修道院', 'identity': '薬草師',
     'theme': '迫害と信念', 'lesson': '恐れずに自分を表現すること', 'talent': '植物の知恵'},
    {'era': '平安時代', 'location': '京の都', 'identity': '宮廷の歌人',
     'theme': '美と無常', 'lesson': '執着を手放すこと', 'talent': '言葉の感性'},
    {'era': '古代インド', 'location': 'ガンジス川のほとり', 'identity': '瞑想の修行者',
     'theme': '内なる静けさ', 'lesson': '世俗の中で悟りを生きること', 'talent': '深い集中力'},
    {'era': 'ルネサンス期', 'location': 'フィレンツェ', 'identity': '工房の芸術家',
     'theme': '創造と後援', 'lesson': '自分の価値を認めること', 'talent': '芸術的な表現力'},
    {'era': 'マヤ文明', 'location': 'ユカタン半島', 'identity': '暦の神官',
     'theme': '時間と宇宙の秩序', 'lesson': '流れに身を委ねること', 'talent': '周期を読む力'},
]

SOUL_MISSIONS = {
    1: '新しい道を切り開き、自らの力で人々を導くこと',
    2: '人と人の間に調和と協力をもたらすこと',
    3: '創造的な表現で世界に喜びを広げること',
    4: '確かな土台を築き、信頼される形を残すこと',
    5: '自由と変化を体験し、その知恵を伝えること',
    6: '愛と責任をもって人を育み、守ること',
    7: '真理を探究し、内なる智慧を深めること',
    8: '豊かさと力を正しく使い、社会に還元すること',
    9: '博愛の心で人類全体に奉仕すること',
    11: '直観の光で人々に霊的な気づきをもたらすこと',
    22: '大きな理想を現実の形として築き上げること',
    33: '無条件の愛で人々を癒し、教え導くこと',
}

KARMIC_LESSONS = {
    1: '自立と自己主張を学ぶ',
    2: '協力と忍耐を学ぶ',
    3: '自己表現と楽観性を学ぶ',
    4: '規律と継続を学ぶ',
    5: '変化を受け入れる柔軟さを学ぶ',
    6: '責任と奉仕を学ぶ',
    7: '内省と信頼を学ぶ',
    8: 'お金と力との健全な関係を学ぶ',
    9: '手放しと無条件の愛を学ぶ',
}

ACCESS_LEVELS = [
    (1.1, '深いアクセス', 'レコードの扉が大きく開いています。直観に届く映像や言葉を信頼してください。'),
    (1.0, '標準的なアクセス', '静かな時間をとれば、必要な情報が自然に届きます。'),
    (0.0, '限定的なアクセス', '今は受け取れる情報が限られています。瞑想で心を整えてから向き合いましょう。'),
]

GUIDANCE = [
    'あなたの魂は、今この人生で必要な経験をすべて選んできました。',
    '過去世で培った才能は、今も静かにあなたの中で息づいています。',
    '繰り返すパターンに気づいたとき、それは手放す準備ができた合図です。',
    'レコードはあなたを裁くものではなく、思い出させるためのものです。',
    '魂の契約は、愛と成長のために結ばれています。',
]


class SoulAge(BaseModel):
    category: str
    name: str
    level: int
    experience: str
    characteristics: List[str]


class SoulType(BaseModel):
    essence: str
    role: str
    frequency: int


class PastLife(BaseModel):
    era: str
    location: str
    identity: str
    theme: str
    lesson: str
    talent: str


class RecordAccess(BaseModel):
    level: int
    label: str
    message: str


class AkashicReading(BaseModel):
    """アカシックレコードの結果"""
    soul_signature: str
    soul_age: SoulAge
    soul_type: SoulType
    soul_origin: str
    past_lives: List[PastLife]
    recurring_themes: List[str]
    talents_carried_over: List[str]
    life_path_number: int
    soul_mission: str
    karmic_lessons: List[str]
    missing_numbers: List[int]
    record_access: RecordAccess
    guidance: str
    core_meaning: str


def missing_numbers(digits: str) -> List[int]:
    return [number for number in range(1, 10) if str(number) not in digits]


def past_life_indices(digest: bytes, count: int = 3) -> List[int]:
    """ダイジェストのバイト列から重複しない過去世を選ぶ"""
    indices = []
    for byte in digest:
        index = byte % len(PAST_LIVES)
        if index not in indices:
            indices.append(index)
        if len(indices) == count:
            return indices
    for index in range(len(PAST_LIVES)):
        if len(indices) == count:
            break
        if index not in indices:
            indices.append(index)
    return indices


class AkashicRecordsEngine(BaseDivinationEngine[AkashicReading]):
    """魂のシグネチャーから過去世と使命を読み解くエンジン"""

    divination_type = 'akashic'

    def soul_signature(self) -> bytes:
        birth = self.input.birth_datetime()
        source = f"{self.input.full_name}:{birth.date().isoformat() if birth else ''}"
        return hashlib.sha256(source.encode('utf-8')).digest()

    def calculate(self) -> AkashicReading:
        digest = self.soul_signature()
        age_value = int.from_bytes(digest[:4], 'big') % (len(SOUL_AGES) * 7)
        key, age_name, experience, characteristics = SOUL_AGES[age_value // 7]
        soul_age = SoulAge(
            category=key,
            name=age_name,
            level=age_value % 7 + 1,
            experience=experience,
            characteristics=characteristics,
        )
        essence, role = SOUL_TYPES[int.from_bytes(digest[4:8], 'big') % len(SOUL_TYPES)]
        soul_type = SoulType(
            essence=essence,
            role=role,
            frequency=50 + int.from_bytes(digest[8:10], 'big') % 51,
        )
        origin = SOUL_ORIGINS[int.from_bytes(digest[10:14], 'big') % len(SOUL_ORIGINS)]
        lives = [PastLife(**PAST_LIVES[index]) for index in past_life_indices(digest[14:])]

        birth = self.input.birth_datetime()
        life_path = self._life_path()
        digits = birth.strftime('%Y%m%d') if birth else ''
        missing = missing_numbers(digits) if birth else []
        access = self._record_access()
        logger.debug(f"akashic age={key} type={essence} life_path={life_path}")

        seed = self.generate_seed(self.get_environmental_modifier() * 100)
        mission = SOUL_MISSIONS.get(life_path, SOUL_MISSIONS[9])
        guidance = (
            f"{pick(GUIDANCE, seed)}あなたは{age_name}として、{role}の道を歩んでいます。"
            f"今世の使命は{mission}です。{access.message}"
        )
        return AkashicReading(
            soul_signature=digest.hex(),
            soul_age=soul_age,
            soul_type=soul_type,
            soul_origin=origin,
            past_lives=lives,
            recurring_themes=[life.theme for life in lives],
            talents_carried_over=[life.talent for life in lives],
            life_path_number=life_path,
            soul_mission=mission,
            karmic_lessons=[KARMIC_LESSONS[number] for number in missing],
            missing_numbers=missing,
            record_access=access,
            guidance=self.generate_personalized_message(guidance),
            core_meaning=(
                f"{age_name}（{role}）。{lives[0].era}の{lives[0].identity}としての記憶が、"
                f"今世で{mission}を後押ししています。"
            ),
        )

    def _life_path(self) -> int:
        birth = self.input.birth_datetime()
        if birth is None:
            return 9
        return reduce_number(sum_digits(int(birth.strftime('%Y%m%d'))))

    def _record_access(self) -> RecordAccess:
        modifier = self.get_environmental_modifier()
        for threshold, label, message in ACCESS_LEVELS:
            if modifier >= threshold:
                break
        return RecordAccess(level=min(10, max(1, round(modifier * 7))), label=label, message=message)
