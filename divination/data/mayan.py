"""マヤ暦（ツォルキン・ハアブ）のデータ"""

# 20の太陽の紋章（index 0 = Imix）
DAY_SIGNS = [
    {'number': 1, 'name': 'Imix', 'japanese': '赤い竜', 'nahuatl': 'Cipactli', 'color': '赤', 'direction': '東',
     'element': 'water', 'meaning': '誕生と育み、原初の生命力', 'keywords': ['誕生', '育成', '信頼', '源'],
     'nawal': {'animal': 'ワニ', 'power': '創造', 'shadow': '恐れ'}},
    {'number': 2, 'name': "Ik'", 'japanese': '白い風', 'nahuatl': 'Ehecatl', 'color': '白', 'direction': '北',
     'element': 'air', 'meaning': '息吹と霊感、伝える力', 'keywords': ['伝達', '霊性', '呼吸', '浄化'],
     'nawal': {'animal': 'ハチドリ', 'power': 'コミュニケーション', 'shadow': '散漫'}},
    {'number': 3, 'name': "Ak'bal", 'japanese': '青い夜', 'nahuatl': 'Calli', 'color': '青', 'direction': '西',
     'element': 'water', 'meaning': '夢と豊かさ、内なる家', 'keywords': ['夢', '豊かさ', '直感', '安らぎ'],
     'nawal': {'animal': 'ジャガー', 'power': '夢見', 'shadow': '孤立'}},
    {'number': 4, 'name': "K'an", 'japanese': '黄色い種', 'nahuatl': 'Cuetzpalin', 'color': '黄', 'direction': '南',
     'element': 'earth', 'meaning': '可能性の種、開花への意志', 'keywords': ['成長', '気づき', '目標', '開花'],
     'nawal': {'animal': 'トカゲ', 'power': '成熟', 'shadow': '頑固'}},
    {'number': 5, 'name': 'Chikchan', 'japanese': '赤い蛇', 'nahuatl': 'Coatl', 'color': '赤', 'direction': '東',
     'element': 'fire', 'meaning': '生命力と本能、情熱', 'keywords': ['生命力', '本能', '情熱', '身体'],
     'nawal': {'animal': '蛇', 'power': '生存本能', 'shadow': '執着'}},
    {'number': 6, 'name': 'Kimi', 'japanese': '白い世界の橋渡し', 'nahuatl': 'Miquiztli', 'color': '白', 'direction': '北',
     'element': 'air', 'meaning': '死と再生、世界をつなぐ橋', 'keywords': ['手放し', '機会', '平等', '橋渡し'],
     'nawal': {'animal': 'フクロウ', 'power': '変容', 'shadow': '喪失への恐れ'}},
    {'number': 7, 'name': "Manik'", 'japanese': '青い手', 'nahuatl': 'Mazatl', 'color': '青', 'direction': '西',
     'element': 'water', 'meaning': '癒しと達成、知る手', 'keywords': ['癒し', '達成', '知識', '実行'],
     'nawal': {'animal': '鹿', 'power': '癒し', 'shadow': '抱え込み'}},
    {'number': 8, 'name': 'Lamat', 'japanese': '黄色い星', 'nahuatl': 'Tochtli', 'color': '黄', 'direction': '南',
     'element': 'earth', 'meaning': '美と調和、芸術性', 'keywords': ['美', '調和', '芸術', '優雅'],
     'nawal': {'animal': 'ウサギ', 'power': '豊穣', 'shadow': '完璧主義'}},
    {'number': 9, 'name': 'Muluk', 'japanese': '赤い月', 'nahuatl': 'Atl', 'color': '赤', 'direction': '東',
     'element': 'water', 'meaning': '浄化と流れ、宇宙の水', 'keywords': ['浄化', '流れ', '感情', '使命'],
     'nawal': {'animal': '魚', 'power': '浄化', 'shadow': '感情の氾濫'}},
    {'number': 10, 'name': 'Ok', 'japanese': '白い犬', 'nahuatl': 'Itzcuintli', 'color': '白', 'direction': '北',
     'element': 'air', 'meaning': '愛と忠誠、心の導き', 'keywords': ['愛', '忠誠', '家族', '誠実'],
     'nawal': {'animal': '犬', 'power': '無条件の愛', 'shadow': '依存'}},
    {'number': 11, 'name': 'Chuwen', 'japanese': '青い猿', 'nahuatl': 'Ozomatli', 'color': '青', 'direction': '西',
     'element': 'water', 'meaning': '遊びと魔法、創造性', 'keywords': ['遊び', '創造', 'ユーモア', '魔法'],
     'nawal': {'animal': '猿', 'power': '芸術', 'shadow': '軽薄'}},
    {'number': 12, 'name': 'Eb', 'japanese': '黄色い人', 'nahuatl': 'Malinalli', 'color': '黄', 'direction': '南',
     'element': 'earth', 'meaning': '自由意志と知恵、人の道', 'keywords': ['自由意志', '知恵', '影響', '道'],
     'nawal': {'animal': '草', 'power': '人間性', 'shadow': '独善'}},
    {'number': 13, 'name': 'Ben', 'japanese': '赤い空歩く人', 'nahuatl': 'Acatl', 'color': '赤', 'direction': '東',
     'element': 'fire', 'meaning': '探求と目覚め、天と地をつなぐ', 'keywords': ['探求', '目覚め', '奉仕', '空間'],
     'nawal': {'animal': '葦', 'power': '成長', 'shadow': '落ち着きのなさ'}},
    {'number': 14, 'name': 'Ix', 'japanese': '白い魔法使い', 'nahuatl': 'Ocelotl', 'color': '白', 'direction': '北',
     'element': 'air', 'meaning': '受容と魅惑、時を超える力', 'keywords': ['受容', '魅力', '無時間', '許し'],
     'nawal': {'animal': 'ジャガー', 'power': '魔術', 'shadow': '支配'}},
    {'number': 15, 'name': 'Men', 'japanese': '青い鷲', 'nahuatl': 'Cuauhtli', 'color': '青', 'direction': '西',
     'element': 'water', 'meaning': 'ビジョンと洞察、高い視点', 'keywords': ['ビジョン', '洞察', '創造', '心'],
     'nawal': {'animal': '鷲', 'power': '先見', 'shadow': '批判'}},
    {'number': 16, 'name': "Kib'", 'japanese': '黄色い戦士', 'nahuatl': 'Cozcacuauhtli', 'color': '黄', 'direction': '南',
     'element': 'earth', 'meaning': '知性と勇気、問いかける力', 'keywords': ['勇気', '知性', '問い', '恐れのなさ'],
     'nawal': {'animal': 'ハゲワシ', 'power': '叡智', 'shadow': '疑い'}},
    {'number': 17, 'name': "Kab'an", 'japanese': '赤い地球', 'nahuatl': 'Ollin', 'color': '赤', 'direction': '東',
     'element': 'fire', 'meaning': '共時性と舵取り、大地の導き', 'keywords': ['共時性', '進化', '舵取り', 'ナビゲーション'],
     'nawal': {'animal': '大地', 'power': '共時性', 'shadow': '混乱'}},
    {'number': 18, 'name': "Etz'nab", 'japanese': '白い鏡', 'nahuatl': 'Tecpatl', 'color': '白', 'direction': '北',
     'element': 'air', 'meaning': '真実と秩序、映し出す鏡', 'keywords': ['真実', '秩序', '反映', '無限'],
     'nawal': {'animal': '黒曜石', 'power': '明晰', 'shadow': '厳しさ'}},
    {'number': 19, 'name': 'Kawak', 'japanese': '青い嵐', 'nahuatl': 'Quiahuitl', 'color': '青', 'direction': '西',
     'element': 'water', 'meaning': '変容と自己発生、嵐の力', 'keywords': ['変容', 'エネルギー', '触媒', '刷新'],
     'nawal': {'animal': '雷雨', 'power': '変容', 'shadow': '破壊衝動'}},
    {'number': 20, 'name': 'Ajaw', 'japanese': '黄色い太陽', 'nahuatl': 'Xochitl', 'color': '黄', 'direction': '南',
     'element': 'fire', 'meaning': '悟りと生命、普遍の火', 'keywords': ['悟り', '生命', '光', '無条件の愛'],
     'nawal': {'animal': '太陽', 'power': '統合', 'shadow': '自己中心'}},
]

# 13の銀河の音
GALACTIC_TONES = [
    {'number': 1, 'name': 'Magnetic', 'japanese': '磁気の音', 'action': '引き寄せる', 'power': '目的', 'question': '私の目的は何か'},
    {'number': 2, 'name': 'Lunar', 'japanese': '月の音', 'action': '安定させる', 'power': '挑戦', 'question': '私の挑戦は何か'},
    {'number': 3, 'name': 'Electric', 'japanese': '電気の音', 'action': '活性化する', 'power': '奉仕', 'question': 'どのように奉仕できるか'},
    {'number': 4, 'name': 'Self-Existing', 'japanese': '自己存在の音', 'action': '定義する', 'power': '形', 'question': '奉仕の形は何か'},
    {'number': 5, 'name': 'Overtone', 'japanese': '倍音の音', 'action': '力を与える', 'power': '輝き', 'question': 'どのように力を得るか'},
    {'number': 6, 'name': 'Rhythmic', 'japanese': 'リズムの音', 'action': '組織する', 'power': '平等', 'question': 'どのように平等を広げるか'},
    {'number': 7, 'name': 'Resonant', 'japanese': '共振の音', 'action': '調律する', 'power': '調律', 'question': 'どのように調律するか'},
    {'number': 8, 'name': 'Galactic', 'japanese': '銀河の音', 'action': '調和させる', 'power': '統合', 'question': '信じることを生きているか'},
    {'number': 9, 'name': 'Solar', 'japanese': '太陽の音', 'action': '脈動させる', 'power': '意図', 'question': 'どのように目的を達成するか'},
    {'number': 10, 'name': 'Planetary', 'japanese': '惑星の音', 'action': '完成させる', 'power': '現実化', 'question': 'どのように完成させるか'},
    {'number': 11, 'name': 'Spectral', 'japanese': 'スペクトルの音', 'action': '解き放つ', 'power': '解放', 'question': 'どのように手放すか'},
    {'number': 12, 'name': 'Crystal', 'japanese': '水晶の音', 'action': '献身する', 'power': '協力', 'question': 'どのように分かち合うか'},
    {'number': 13, 'name': 'Cosmic', 'japanese': '宇宙の音', 'action': '超越する', 'power': '存在', 'question': 'どのように喜びと愛を広げるか'},
]

# ハアブ暦: 18ヶ月×20日 + ワイェブ5日
HAAB_MONTHS = [
    {'number': 1, 'name': 'Pop', 'meaning': 'ござ', 'energy': '始まりと権威'},
    {'number': 2, 'name': "Wo'", 'meaning': '黒い結合', 'energy': '統合と学び'},
    {'number': 3, 'name': 'Sip', 'meaning': '赤い結合', 'energy': '狩猟と感謝'},
    {'number': 4, 'name': "Sotz'", 'meaning': 'コウモリ', 'energy': '内省と夜の知恵'},
    {'number': 5, 'name': 'Sek', 'meaning': '天と地', 'energy': '大地とのつながり'},
    {'number': 6, 'name': 'Xul', 'meaning': '犬', 'energy': '忠誠と導き'},
    {'number': 7, 'name': "Yaxk'in", 'meaning': '新しい太陽', 'energy': '再生と光'},
    {'number': 8, 'name': 'Mol', 'meaning': '水', 'energy': '集まりと豊穣'},
    {'number': 9, 'name': "Ch'en", 'meaning': '黒い嵐', 'energy': '浄化と深層'},
    {'number': 10, 'name': 'Yax', 'meaning': '緑の嵐', 'energy': '成長と刷新'},
    {'number': 11, 'name': "Sak'", 'meaning': '白い嵐', 'energy': '明晰と純化'},
    {'number': 12, 'name': 'Keh', 'meaning': '赤い嵐', 'energy': '力と行動'},
    {'number': 13, 'name': 'Mak', 'meaning': '閉じ込められたもの', 'energy': '蓄えと準備'},
    {'number': 14, 'name': "K'ank'in", 'meaning': '黄色い太陽', 'energy': '熟成と実り'},
    {'number': 15, 'name': 'Muwan', 'meaning': 'フクロウ', 'energy': '知恵と洞察'},
    {'number': 16, 'name': 'Pax', 'meaning': '植える時', 'energy': '種まきと決意'},
    {'number': 17, 'name': "K'ayab", 'meaning': 'カメ', 'energy': '忍耐と歩み'},
    {'number': 18, 'name': "Kumk'u", 'meaning': '穀倉', 'energy': '収穫と蓄積'},
    {'number': 19, 'name': 'Wayeb', 'meaning': '名もなき日々', 'energy': '境界と静養'},
]

# 13日間のウェーブスペルにおける各日の指針
WAVESPELL_GUIDANCE = [
    '目的を定め、引き寄せたいものに意識を向けましょう',
    '課題を見極め、必要な対立を受け入れましょう',
    '行動を起こし、誰かの役に立つことをしましょう',
    '形を整え、計画を具体化しましょう',
    'あなた自身の輝きを放ち、周囲に力を与えましょう',
    '生活のリズムを整え、バランスを取りましょう',
    '高い周波数に調律し、内なる声に耳を傾けましょう',
    '信じることを実践し、すべての生命と調和しましょう',
    '意図を実現するために力を注ぎましょう',
    '創造を完成させ、形にしましょう',
    '役目を終えたものを手放しましょう',
    '仲間と分かち合い、協力しましょう',
    '限界を超え、喜びと共に存在しましょう',
]

BIORHYTHM_CYCLES = {
    'physical': 23,
    'emotional': 28,
    'intellectual': 33,
    'tzolkin': 260,
}
