"""3層解釈システム（古典・現代・実践）"""
from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel

from .models import EnvironmentData

VERSION = '3.0.0'

TRADITIONS = {
    'astrology': {
        'primary_source': 'Ptolemy Tetrabiblos (140 CE)',
        'core_system': 'Hellenistic Astrology',
        'key_elements': ['惑星品位', '4元素', 'ハウスシステム', 'アスペクト理論'],
        'cultural_origin': 'バビロニア・ギリシャ・ローマ',
    },
    'tarot': {
        'primary_source': 'Tarot de Marseille (15世紀)',
        'core_system': 'ヨーロッパ秘教伝統',
        'key_elements': ['大アルカナ22枚', '小アルカナ56枚', '生命の樹対応', '錬金術象徴'],
        'cultural_origin': 'イタリア・フランス・ドイツ',
    },
    'numerology': {
        'primary_source': 'Pythagoras School (6世紀BCE)',
        'core_system': 'ピタゴラス数秘学',
        'key_elements': ['生命数', '運命数', '表現数', '魂の衝動数'],
        'cultural_origin': '古代ギリシャ・エジプト・カルデア',
    },
    'iching': {
        'primary_source': '周易 (11世紀BCE)',
        'core_system': '易経64卦',
        'key_elements': ['陰陽', '八卦', '五行', '十干十二支'],
        'cultural_origin': '古代中国',
    },
    'nine-star-ki': {
        'primary_source': '九星気学 (平安時代)',
        'core_system': '九星方位学',
        'key_elements': ['九星', '五行', '方位', '年月日時盤'],
        'cultural_origin': '中国・日本',
    },
    'shichu-suimei': {
        'primary_source': '四柱推命 (唐代)',
        'core_system': '陰陽五行説',
        'key_elements': ['年柱月柱日柱時柱', '十干十二支', '五行相生相克', '格局'],
        'cultural_origin': '古代中国',
    },
    'celtic': {
        'primary_source': 'Celtic Tree Oracle',
        'core_system': 'ケルト自然信仰',
        'key_elements': ['聖なる樹木', '季節暦', 'オガム文字', 'ドルイド伝承'],
        'cultural_origin': 'アイルランド・スコットランド',
    },
    'runes': {
        'primary_source': 'Elder Futhark (2-8世紀)',
        'core_system': 'ゲルマン文字体系',
        'key_elements': ['24ルーン文字', '3つのアエット', 'ガルドル', 'バインドルーン'],
        'cultural_origin': 'スカンジナビア・ゲルマン',
    },
    'kabbalah': {
        'primary_source': 'Sefer Yetzirah (2-6世紀)',
        'core_system': 'ユダヤ神秘主義',
        'key_elements': ['生命の樹', '10セフィロト', '22パス', 'ヘブライ文字'],
        'cultural_origin': '古代イスラエル・中世ヨーロッパ',
    },
    'mayan': {
        'primary_source': 'ドレスデン絵文書 (11-12世紀)',
        'core_system': 'マヤ暦法',
        'key_elements': ['ツォルキン260日', 'ハアブ365日', '長期暦', '20の紋章と13の音'],
        'cultural_origin': 'メソアメリカ',
    },
    'chakra': {
        'primary_source': 'Sat-Chakra-Nirupana (1577)',
        'core_system': 'タントラ・ヨーガ',
        'key_elements': ['7つのチャクラ', 'ナーディ', 'クンダリーニ', 'ビージャ・マントラ'],
        'cultural_origin': '古代インド',
    },
    'feng-shui': {
        'primary_source': '葬書 (4世紀)',
        'core_system': '八宅風水・玄空飛星',
        'key_elements': ['卦数', '八方位', '五行', '九星飛泊'],
        'cultural_origin': '古代中国',
    },
    'aura-soma': {
        'primary_source': 'Vicky Wall (1983)',
        'core_system': 'カラーセラピー',
        'key_elements': ['イクイリブリアムボトル', '色彩心理', 'ポマンダー', 'クイントエッセンス'],
        'cultural_origin': 'イギリス',
    },
    'akashic': {
        'primary_source': 'Edgar Cayce リーディング (20世紀)',
        'core_system': '神智学',
        'key_elements': ['アカシャ', '魂の記録', 'カルマ', '転生'],
        'cultural_origin': '古代インド・近代神智学',
    },
}

DEFAULT_TRADITION = 'numerology'

ANCIENT_WISDOM = {
    'astrology': '「天にあるがごとく、地にもあり」- ヘルメス・トリスメギストス',
    'numerology': '「万物は数なり」- ピタゴラス',
    'iching': '「易は変化なり、変化は不変なり」- 老子',
    'tarot': '「汝自身を知れ」- デルフォイの神託',
}
DEFAULT_WISDOM = '古の賢者たちが伝えた普遍的な真理'

SCIENTIFIC_CONTEXT = {
    'astrology': '天体の重力作用と生体リズムの相関研究',
    'numerology': '数学的パターン認識と認知科学',
    'iching': '複雑系理論とカオス数学',
}
DEFAULT_SCIENTIFIC_CONTEXT = '心理学的プラセボ効果と暗示機能'

TIME_HONORED_TRUTHS = [
    '困難は成長の機会である',
    'バランスこそが調和をもたらす',
    '変化は生命の本質である',
    '内なる知恵を信頼すべし',
    '全ては相互に関連している',
]

PSYCHOLOGY_SCHOOLS = ['Jung分析心理学', '認知行動療法', 'ポジティブ心理学']
DECISION_MODELS = ['SWOT分析', 'リスク評価', '機会コスト', '価値観整合性']

TIMING_ADVICE = {
    '新月': '新しい計画の開始と意図設定',
    '上弦の月': '行動の推進と課題解決',
    '満月': '成果の収穫と感謝の表現',
    '下弦の月': '手放しと内省の深化',
}

DAILY_ROUTINES = {
    'morning': '活力ある行動計画',
    'noon': '集中的な作業',
    'evening': '省察と感謝の実践',
    'night': '内的対話と休息',
}

DEFAULT_CORE_MEANING = '重要な変化とバランスの調整'


class ClassicalLayer(BaseModel):
    traditional_meaning: str
    historical_context: str
    ancient_wisdom: str
    cultural_significance: str
    time_honored_truths: List[str]
    source_attribution: str


class ModernLayer(BaseModel):
    psychological_profile: str
    behavioral_patterns: str
    cognitive_insights: str
    emotional_dynamics: str
    social_implications: str
    scientific_context: str


class PracticalLayer(BaseModel):
    actionable_advice: List[str]
    daily_application: str
    decision_making: str
    relationship_guidance: str
    career_insights: str
    personal_growth: str
    timing_guidance: str


class InterpretationMetadata(BaseModel):
    divination_type: str
    configuration: str
    confidence: float
    environmental_influence: float
    historical_resonance: float
    practical_relevance: float
    generated_at: datetime
    version: str


class ThreeLayerInterpretation(BaseModel):
    classical: ClassicalLayer
    modern: ModernLayer
    practical: PracticalLayer
    meta: InterpretationMetadata


def get_tradition(divination_type: str) -> Dict:
    return TRADITIONS.get(divination_type, TRADITIONS[DEFAULT_TRADITION])


def calculate_confidence(historical_patterns: List[Dict]) -> float:
    return 0.85 if historical_patterns else 0.70


def calculate_environmental_influence(context: Optional[EnvironmentData]) -> float:
    if context is None:
        return 0.5
    influence = 0.5
    if context.weather:
        influence += 0.2
    if context.solar:
        influence += 0.2
    if context.social is not None:
        influence += 0.1
    return round(min(influence, 1.0), 2)


def _core_meaning(result: Any) -> str:
    if isinstance(result, BaseModel):
        result = result.model_dump()
    if isinstance(result, dict):
        return result.get('core_meaning') or DEFAULT_CORE_MEANING
    return DEFAULT_CORE_MEANING


def _lunar_phase_name(context: Optional[EnvironmentData]) -> Optional[str]:
    if context and context.lunar and context.lunar.phase_name:
        return context.lunar.phase_name
    return None


def _classical_layer(divination_type: str, result: Any, historical_patterns: List[Dict]) -> ClassicalLayer:
    tradition = get_tradition(divination_type)
    primary_pattern = historical_patterns[0] if historical_patterns else None

    if primary_pattern:
        historical_context = (
            f"{primary_pattern.get('era', '')}の{primary_pattern.get('astrologer', '')}による類似解釈: "
            f"「{primary_pattern.get('interpretation', '')}」"
        )
        source = primary_pattern.get('source') or tradition['primary_source']
    else:
        historical_context = f"{divination_type}の古典的解釈に基づく意味"
        source = tradition['primary_source']

    return ClassicalLayer(
        traditional_meaning=(
            f"{tradition['core_system']}の伝統に基づき、この配置は「{_core_meaning(result)}」を示しています。"
            f"{tradition['cultural_origin']}の智恵によれば、これは重要な意味を持つ組み合わせです。"
        ),
        historical_context=historical_context,
        ancient_wisdom=ANCIENT_WISDOM.get(divination_type, DEFAULT_WISDOM),
        cultural_significance=(
            f"この解釈は何世紀にもわたって{divination_type}の実践者によって検証され、文化的に意味を持ち続けてきました。"
            "現代においても、その本質的な洞察は変わることがありません。"
        ),
        time_honored_truths=list(TIME_HONORED_TRUTHS),
        source_attribution=source,
    )


def _modern_layer(divination_type: str, context: Optional[EnvironmentData]) -> ModernLayer:
    season = '現在の季節'
    if context and context.seasonal and context.seasonal.season:
        season = context.seasonal.season
    lunar_phase = _lunar_phase_name(context) or '現在の月相'

    social_events = '季節的要因'
    if context and context.social and context.social.get('seasonal_events'):
        social_events = '、'.join(context.social['seasonal_events'])

    return ModernLayer(
        psychological_profile=(
            '現代心理学の観点から、この配置は特定のパーソナリティ特性と認知パターンを示唆しています。'
            f"{PSYCHOLOGY_SCHOOLS[0]}のアプローチでは、これを個性化の過程として理解できます。"
        ),
        behavioral_patterns=(
            f"行動科学的分析により、現在の環境要因（{season}、{lunar_phase}）が意思決定パターンに影響を与えていることが示唆されます。"
        ),
        cognitive_insights=(
            '認知心理学の視点では、この解釈は思考の偏りパターンや情報処理の特徴を明らかにし、'
            'より効果的な問題解決アプローチを提案できます。'
        ),
        emotional_dynamics='現在の感情状態は安定した傾向にあり、これは解釈の受容性と行動への移行に影響を与えます。',
        social_implications=(
            f"社会環境（{social_events}）の影響を考慮すると、対人関係や社会的役割において特定の動向が予想されます。"
        ),
        scientific_context=SCIENTIFIC_CONTEXT.get(divination_type, DEFAULT_SCIENTIFIC_CONTEXT),
    )


def _practical_layer(context: Optional[EnvironmentData]) -> PracticalLayer:
    lunar_phase = _lunar_phase_name(context) or '新月'
    timing = TIMING_ADVICE.get(lunar_phase, '調和的な行動')
    time_of_day = '日中'
    return PracticalLayer(
        actionable_advice=[
            '今日から始められること: 朝の瞑想と意図設定',
            '1週間以内に取り組むこと: 人間関係の質的向上',
            '1ヶ月かけて育むこと: 新しいスキルの習得',
            '長期的に目指すこと: 真の自己実現と貢献',
        ],
        daily_application=(
            f"{time_of_day}の時間帯の特性を活かし、具体的な日常行動として"
            f"{DAILY_ROUTINES.get(time_of_day, '意識的な生活')}を実践することが推奨されます。"
        ),
        decision_making=(
            f"重要な判断を行う際は、直感（60%）と論理（40%）のバランスを保ちながら、"
            f"{DECISION_MODELS[0]}を活用して多角的に検討してください。"
        ),
        relationship_guidance='現在の対人関係において、相互理解と共感の深化に焦点を当てることで、より深い理解と調和を築くことができるでしょう。',
        career_insights='職業的発展において、あなたの強みである創造性とコミュニケーション能力を活かし、リーダーシップと統合力の発展の方向性で成長を図ることが効果的です。',
        personal_growth='個人的成長のために、現在の発達段階（統合と自己実現の段階）に適した学習アプローチと自己省察を継続してください。',
        timing_guidance=(
            f"{lunar_phase}の時期は{timing}に適しており、この自然のリズムに合わせて行動することで最良の結果が期待できます。"
        ),
    )


def generate_three_layer_interpretation(divination_type: str, primary_result: Any,
                                        environmental_context: Optional[EnvironmentData] = None,
                                        configuration: str = 'standard',
                                        historical_patterns: Optional[List[Dict]] = None,
                                        generated_at: Optional[datetime] = None) -> ThreeLayerInterpretation:
    """任意の占術結果を3層解釈に変換する

    historical_patternsは外部の歴史的パターン照合の結果（なければ空）
    """
    patterns = historical_patterns or []
    return ThreeLayerInterpretation(
        classical=_classical_layer(divination_type, primary_result, patterns),
        modern=_modern_layer(divination_type, environmental_context),
        practical=_practical_layer(environmental_context),
        meta=InterpretationMetadata(
            divination_type=divination_type,
            configuration=configuration,
            confidence=calculate_confidence(patterns),
            environmental_influence=calculate_environmental_influence(environmental_context),
            historical_resonance=0.8 if patterns else 0.3,
            practical_relevance=0.9,
            generated_at=generated_at or datetime.now(),
            version=VERSION,
        ),
    )
