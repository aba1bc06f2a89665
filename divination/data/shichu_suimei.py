"""四柱推命（十干・十二支・通変星・十二運）のデータ"""
from typing import Optional


# 十干（index 0 = 甲）
HEAVENLY_STEMS = [
    {'name': '甲', 'reading': 'きのえ', 'element': '木', 'yin_yang': '陽', 'nature': '大木、成長、向上心',
     'personality': ['リーダーシップ', '向上心', '正直', '頑固']},
    {'name': '乙', 'reading': 'きのと', 'element': '木', 'yin_yang': '陰', 'nature': '草花、柔軟性、協調性',
     'personality': ['柔軟性', '協調性', '繊細', '優柔不断']},
    {'name': '丙', 'reading': 'ひのえ', 'element': '火', 'yin_yang': '陽', 'nature': '太陽、情熱、明朗',
     'personality': ['情熱的', '明朗', '派手', '短気']},
    {'name': '丁', 'reading': 'ひのと', 'element': '火', 'yin_yang': '陰', 'nature': '灯火、温かさ、洞察',
     'personality': ['温厚', '洞察力', '献身的', '神経質']},
    {'name': '戊', 'reading': 'つちのえ', 'element': '土', 'yin_yang': '陽', 'nature': '山、安定、包容力',
     'personality': ['包容力', '安定感', '信頼', '鈍重']},
    {'name': '己', 'reading': 'つちのと', 'element': '土', 'yin_yang': '陰', 'nature': '田畑、育成、堅実',
     'personality': ['堅実', '世話好き', '庶民的', '心配性']},
    {'name': '庚', 'reading': 'かのえ', 'element': '金', 'yin_yang': '陽', 'nature': '鋼鉄、決断、正義',
     'personality': ['決断力', '正義感', '行動力', '攻撃的']},
    {'name': '辛', 'reading': 'かのと', 'element': '金', 'yin_yang': '陰', 'nature': '宝石、美、繊細',
     'personality': ['美的感覚', '繊細', 'プライド', '完璧主義']},
    {'name': '壬', 'reading': 'みずのえ', 'element': '水', 'yin_yang': '陽', 'nature': '大海、知恵、自由',
     'personality': ['知性', '自由', '適応力', '放浪癖']},
    {'name': '癸', 'reading': 'みずのと', 'element': '水', 'yin_yang': '陰', 'nature': '雨露、慈愛、直感',
     'personality': ['直感力', '慈愛', '忍耐', '悲観的']},
]

# 十二支（index 0 = 子）。hidden_stemsは蔵干（本気・中気・余気）
EARTHLY_BRANCHES = [
    {'name': '子', 'animal': '鼠', 'element': '水', 'yin_yang': '陽', 'hidden_stems': ['癸']},
    {'name': '丑', 'animal': '牛', 'element': '土', 'yin_yang': '陰', 'hidden_stems': ['己', '癸', '辛']},
    {'name': '寅', 'animal': '虎', 'element': '木', 'yin_yang': '陽', 'hidden_stems': ['甲', '丙', '戊']},
    {'name': '卯', 'animal': '兎', 'element': '木', 'yin_yang': '陰', 'hidden_stems': ['乙']},
    {'name': '辰', 'animal': '竜', 'element': '土', 'yin_yang': '陽', 'hidden_stems': ['戊', '乙', '癸']},
    {'name': '巳', 'animal': '蛇', 'element': '火', 'yin_yang': '陰', 'hidden_stems': ['丙', '戊', '庚']},
    {'name': '午', 'animal': '馬', 'element': '火', 'yin_yang': '陽', 'hidden_stems': ['丁', '己']},
    {'name': '未', 'animal': '羊', 'element': '土', 'yin_yang': '陰', 'hidden_stems': ['己', '丁', '乙']},
    {'name': '申', 'animal': '猿', 'element': '金', 'yin_yang': '陽', 'hidden_stems': ['庚', '壬', '戊']},
    {'name': '酉', 'animal': '鶏', 'element': '金', 'yin_yang': '陰', 'hidden_stems': ['辛']},
    {'name': '戌', 'animal': '犬', 'element': '土', 'yin_yang': '陽', 'hidden_stems': ['戊', '辛', '丁']},
    {'name': '亥', 'animal': '猪', 'element': '水', 'yin_yang': '陰', 'hidden_stems': ['壬', '甲']},
]

FIVE_ELEMENTS = ['木', '火', '土', '金', '水']

# 相生（生じる先）と相剋（剋す先）
GENERATES = {'木': '火', '火': '土', '土': '金', '金': '水', '水': '木'}
CONTROLS = {'木': '土', '火': '金', '土': '水', '金': '木', '水': '火'}

TEN_GODS = {
    '比肩': {'meaning': '自我、独立、競争', 'personality': ['独立心', '自信', '競争心', '頑固'],
           'career': ['起業家', '自営業', 'スポーツ選手', '営業'], 'relationship': '対等な関係を求める、独立性重視'},
    '劫財': {'meaning': '協力、社交、野心', 'personality': ['社交的', '野心的', '行動力', '浪費傾向'],
           'career': ['営業', 'マーケティング', '政治家', '芸能'], 'relationship': '情熱的だが不安定、刺激を求める'},
    '食神': {'meaning': '表現、創造、楽しみ', 'personality': ['楽観的', '創造的', '表現力', '享楽的'],
           'career': ['芸術家', '料理人', 'エンターテイナー', 'デザイナー'], 'relationship': '楽しさ重視、自由な関係を好む'},
    '傷官': {'meaning': '才能、批判、変革', 'personality': ['才能豊か', '批判的', '完璧主義', '反骨精神'],
           'career': ['専門職', '研究者', '批評家', '改革者'], 'relationship': '理想が高い、批判的になりがち'},
    '偏財': {'meaning': '副収入、人脈、変化', 'personality': ['器用', '人脈豊富', '変化を好む', '移り気'],
           'career': ['投資家', '商売人', 'フリーランス', '仲介業'], 'relationship': '自由恋愛、出会いが多い'},
    '正財': {'meaning': '正当な収入、堅実、保守', 'personality': ['堅実', '計画的', '保守的', '倹約家'],
           'career': ['会計士', '銀行員', '公務員', '経理'], 'relationship': '真面目な交際、結婚重視'},
    '偏官': {'meaning': '権力、支配、挑戦', 'personality': ['支配的', '挑戦的', '行動力', '短気'],
           'career': ['経営者', '自衛官', '警察官', 'スポーツ選手'], 'relationship': '情熱的だが衝突しやすい'},
    '正官': {'meaning': '地位、名誉、責任', 'personality': ['責任感', '正義感', '保守的', '権威主義'],
           'career': ['管理職', '官僚', '教師', '法律家'], 'relationship': '伝統的、安定した関係を求める'},
    '偏印': {'meaning': '独創性、研究、孤独', 'personality': ['独創的', '研究熱心', '内向的', '変わり者'],
           'career': ['研究者', '発明家', '占い師', 'プログラマー'], 'relationship': '精神的つながり重視、独特な関係'},
    '印綬': {'meaning': '知識、学問、保護', 'personality': ['知的', '学問好き', '優しい', '依存的'],
           'career': ['教師', '学者', '医師', 'カウンセラー'], 'relationship': '精神的な支えを求める'},
}

# 十二運（長生から順）
TWELVE_STAGES = [
    {'name': '長生', 'energy': 70, 'meaning': '誕生、始まり、成長', 'advice': '新しいことを始めるのに良い時期'},
    {'name': '沐浴', 'energy': 40, 'meaning': '不安定、変化、迷い', 'advice': '焦らず自分探しの時期と受け入れる'},
    {'name': '冠帯', 'energy': 80, 'meaning': '成人、独立、活動', 'advice': '積極的に行動し成果を上げる時期'},
    {'name': '建禄', 'energy': 90, 'meaning': '確立、安定、実力', 'advice': '実力を発揮し地位を確立する時期'},
    {'name': '帝旺', 'energy': 100, 'meaning': '頂点、権力、栄光', 'advice': '頂点にいることを自覚し謙虚に'},
    {'name': '衰', 'energy': 60, 'meaning': '衰退開始、円熟、引き際', 'advice': '無理せず経験を活かす時期'},
    {'name': '病', 'energy': 30, 'meaning': '停滞、病気、休息', 'advice': '休息と回復に専念する時期'},
    {'name': '死', 'energy': 10, 'meaning': '終了、変化、再生', 'advice': '古いものを手放し新生の準備'},
    {'name': '墓', 'energy': 20, 'meaning': '保管、内省、準備', 'advice': '内面を見つめ力を蓄える時期'},
    {'name': '絶', 'energy': 5, 'meaning': '消滅、空虚、無', 'advice': '執着を手放し新たな始まりを待つ'},
    {'name': '胎', 'energy': 50, 'meaning': '妊娠、可能性、準備', 'advice': '新しい可能性を育む時期'},
    {'name': '養', 'energy': 60, 'meaning': '養育、成長、保護', 'advice': '焦らず着実に成長する時期'},
]

# 十干ごとの長生の支（陽干は順行、陰干は逆行）
STAGE_START_BRANCH = [11, 6, 2, 9, 2, 9, 5, 0, 8, 3]

# 納音（六十干支を2つずつ）
NAYIN = [
    '海中金', '炉中火', '大林木', '路傍土', '剣鋒金', '山頭火',
    '澗下水', '城頭土', '白蝋金', '楊柳木', '泉中水', '屋上土',
    '霹靂火', '松柏木', '長流水', '砂中金', '山下火', '平地木',
    '壁上土', '金箔金', '覆灯火', '天河水', '大駅土', '釵釧金',
    '桑柘木', '大渓水', '沙中土', '天上火', '石榴木', '大海水',
]

# 節入り（寅月から丑月）。立春は九星気学の表を使う
MONTH_SETSU = [
    ('立春', 2, 4), ('啓蟄', 3, 6), ('清明', 4, 5), ('立夏', 5, 6),
    ('芒種', 6, 6), ('小暑', 7, 7), ('立秋', 8, 8), ('白露', 9, 8),
    ('寒露', 10, 8), ('立冬', 11, 7), ('大雪', 12, 7), ('小寒', 1, 6),
]

ELEMENT_TRAITS = {
    '木': {'陽': '積極的でリーダーシップがあり、正義感が強く成長を求める',
          '陰': '柔軟で協調性があり、芸術的センスと思いやりを持つ'},
    '火': {'陽': '情熱的で明るく、人を惹きつける魅力とカリスマ性がある',
          '陰': '温かく優しく、細やかな配慮と豊かな感受性を持つ'},
    '土': {'陽': '信頼できて安定感があり、責任感と包容力に富む',
          '陰': '慎重で堅実、計画的で周囲との調和を大切にする'},
    '金': {'陽': '決断力があり正義感が強く、リーダーとしての資質を持つ',
          '陰': '繊細で美的センスがあり、完璧主義的な面がある'},
    '水': {'陽': '知的で柔軟、適応力が高く創造的な発想力を持つ',
          '陰': '内省的で直感的、深い洞察力と共感能力がある'},
}

ELEMENT_CAREERS = {
    '木': '教育、医療、出版、環境関連、成長産業',
    '火': 'エンターテインメント、IT、マーケティング、エネルギー産業',
    '土': '不動産、建設、農業、行政、安定した組織',
    '金': '金融、法律、製造業、貴金属、精密機器',
    '水': '流通、通信、観光、海運、柔軟性が求められる仕事',
}

ELEMENT_HEALTH = {
    '木': '肝臓、胆嚢、目、筋肉、神経系',
    '火': '心臓、小腸、舌、血管、循環器系',
    '土': '脾臓、胃、口、消化器系、免疫系',
    '金': '肺、大腸、鼻、呼吸器系、皮膚',
    '水': '腎臓、膀胱、耳、泌尿器系、生殖器系',
}

SEASON_ELEMENTS = {'春': '木', '夏': '火', '秋': '金', '冬': '水'}


def stem_index(name: str) -> int:
    return [stem['name'] for stem in HEAVENLY_STEMS].index(name)


def sexagenary_name(index: int) -> str:
    """六十干支の名前（0 = 甲子）"""
    return HEAVENLY_STEMS[index % 10]['name'] + EARTHLY_BRANCHES[index % 12]['name']


def sexagenary_index(stem: int, branch: int) -> Optional[int]:
    """十干と十二支の組から六十干支の番号を求める（陰陽が合わなければNone）"""
    for index in range(60):
        if index % 10 == stem and index % 12 == branch:
            return index
    return None
