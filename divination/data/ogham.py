"""オガム文字20字とケルトの祝祭のデータ"""
from typing import Dict, Optional

# 4つのアイクメ（各5字）
OGHAM_FEWS = [
    {
        'symbol': 'ᚁ',
        'name': 'Beith',
        'transcription': 'B',
        'tree': 'White Birch',
        'tree_genus': 'Betula pendula',
        'element': 'air',
        'timing': {
            'months': '12月24日 - 1月20日',
            'season': '冬至後',
            'festivals': ['Yule', 'Winter Solstice'],
        },
        'meanings': {
            'keywords': ['新しい始まり', '浄化', '再生', '可能性', '純粋性'],
            'divinatory': {
                'upright': '新しいサイクルの開始。過去を浄化し、フレッシュなスタートを切る時期です。白樺の清らかなエネルギーが新しい道を照らします。',
                'reversed': '新しい始まりへの恐れや抵抗。過去にとらわれて前進できない状態。浄化が不完全で障害が残っています。',
            },
            'psychological': '心理的な浄化と再生。古いパターンを手放し、新しい自己アイデンティティを確立する段階。',
            'spiritual': '魂の浄化と霊的な新生。高次の自己との新しい関係を築く時期。',
        },
        'correspondences': {
            'color': '純白・銀白',
            'direction': '東',
            'sound': 'b音、高い笛の音',
            'number': 1,
            'ogham_group': 'aicme1',
        },
    },
    {
        'symbol': 'ᚂ',
        'name': 'Luis',
        'transcription': 'L',
        'tree': 'Mountain Ash / Rowan',
        'tree_genus': 'Sorbus aucuparia',
        'element': 'fire',
        'timing': {
            'months': '1月21日 - 2月17日',
            'season': '晩冬',
            'festivals': ['Imbolc前期'],
        },
        'meanings': {
            'keywords': ['保護', '魔術的防御', '洞察', '霊視', '守護'],
            'divinatory': {
                'upright': '強力な保護エネルギーに包まれています。直感が鋭くなり、隠された真実が見えてきます。スピリチュアルな守護が働いています。',
                'reversed': '防御が弱まっている状態。負のエネルギーや悪意ある影響に注意。霊的な混乱や迷いがあります。',
            },
            'psychological': '内なる直感力の覚醒。心理的な境界線の確立と自己防衛機制の強化。',
            'spiritual': '霊的な保護能力の開花。高次元の存在との交流と守護霊の認識。',
        },
        'correspondences': {
            'color': '鮮やかな赤・オレンジ',
            'direction': '南',
            'sound': 'l音、鈴の音',
            'number': 2,
            'ogham_group': 'aicme1',
        },
    },
    {
        'symbol': 'ᚃ',
        'name': 'Fearn',
        'transcription': 'F/V',
        'tree': 'Alder',
        'tree_genus': 'Alnus glutinosa',
        'element': 'water',
        'timing': {
            'months': '2月18日 - 3月17日',
            'season': '春の前兆',
            'festivals': ['Imbolc後期', 'Spring Equinox前'],
        },
        'meanings': {
            'keywords': ['勇気', '前進', '開拓', '決断', '犠牲'],
            'divinatory': {
                'upright': '勇気を持って未知の領域に踏み出す時です。困難な状況でも前進する力があります。開拓者精神が成功をもたらします。',
                'reversed': '前進への恐れや優柔不断。決断を避けている状態。勇気が足りず、現状に留まってしまっています。',
            },
            'psychological': '自己主張と積極性の発達。困難に立ち向かう心理的強さの獲得。',
            'spiritual': '霊的な戦士としての目覚め。真理のために戦う意志の確立。',
        },
        'correspondences': {
            'color': '深い緑・茶色',
            'direction': '西',
            'sound': 'f音、風の音',
            'number': 3,
            'ogham_group': 'aicme1',
        },
    },
    {
        'symbol': 'ᚄ',
        'name': 'Saille',
        'transcription': 'S',
        'tree': 'Willow',
        'tree_genus': 'Salix alba',
        'element': 'water',
        'timing': {
            'months': '3月18日 - 4月14日',
            'season': '春分',
            'festivals': ['Spring Equinox', 'Ostara'],
        },
        'meanings': {
            'keywords': ['直感', '月の力', '感受性', '夢', 'サイキック能力'],
            'divinatory': {
                'upright': '直感と感受性が高まっています。月のリズムに従い、夢や内なる声に耳を傾けてください。サイキック能力が開花する時期です。',
                'reversed': '感情の混乱や直感への不信。月の影響に振り回されている状態。サイキック能力の乱用や混乱があります。',
            },
            'psychological': '感情的知性の発達。無意識との健全な関係の構築。',
            'spiritual': 'サイキック能力の開花。月の女神との深いつながりの確立。',
        },
        'correspondences': {
            'color': '薄緑・銀',
            'direction': '西',
            'sound': 's音、水の流れる音',
            'number': 4,
            'ogham_group': 'aicme1',
        },
    },
    {
        'symbol': 'ᚅ',
        'name': 'Nion',
        'transcription': 'N',
        'tree': 'Ash',
        'tree_genus': 'Fraxinus excelsior',
        'element': 'air',
        'timing': {
            'months': '4月15日 - 5月12日',
            'season': '晩春',
            'festivals': ['Beltane前期'],
        },
        'meanings': {
            'keywords': ['成長', '拡大', '霊的戦士', '宇宙軸', '連結'],
            'divinatory': {
                'upright': '急速な成長と拡大の時期です。霊的な戦士として目覚め、宇宙とのつながりを感じます。新しい次元への扉が開かれます。',
                'reversed': '成長の停滞や方向性の迷い。霊的な戦いを避けている状態。宇宙とのつながりが弱まっています。',
            },
            'psychological': '自己拡大と成長意欲の高まり。リーダーシップ能力の発達。',
            'spiritual': '霊的戦士としての使命の自覚。宇宙意識との統合。',
        },
        'correspondences': {
            'color': '薄緑・青緑',
            'direction': '北',
            'sound': 'n音、風が木を通る音',
            'number': 5,
            'ogham_group': 'aicme1',
        },
    },
    {
        'symbol': 'ᚆ',
        'name': 'Huathe',
        'transcription': 'H',
        'tree': 'Hawthorn',
        'tree_genus': 'Crataegus monogyna',
        'element': 'fire',
        'timing': {
            'months': '5月13日 - 6月9日',
            'season': '初夏',
            'festivals': ['Beltane', '聖なる結婚'],
        },
        'meanings': {
            'keywords': ['浄化', '守護', '聖なる結婚', '希望', '保護'],
            'divinatory': {
                'upright': '浄化と保護のエネルギーが働いています。聖なる結婚や深い絆の形成。希望の光が見えてきます。',
                'reversed': '保護の欠如や希望の喪失。浄化が必要な状況。関係性での問題や障害があります。',
            },
            'psychological': '心理的な浄化と保護機制の確立。健全な関係性の構築。',
            'spiritual': '聖なる結婚の体験。神聖な保護と祝福の受容。',
        },
        'correspondences': {
            'color': '白・薄ピンク',
            'direction': '南東',
            'sound': 'h音、そよ風の音',
            'number': 6,
            'ogham_group': 'aicme2',
        },
    },
    {
        'symbol': 'ᚇ',
        'name': 'Duir',
        'transcription': 'D',
        'tree': 'Oak',
        'tree_genus': 'Quercus robur',
        'element': 'earth',
        'timing': {
            'months': '6月10日 - 7月7日',
            'season': '夏至',
            'festivals': ['Summer Solstice', 'Litha'],
        },
        'meanings': {
            'keywords': ['力', '安定', '正義', '王権', '持久力'],
            'divinatory': {
                'upright': '強大な力と安定性があなたを支えています。正義が勝利し、リーダーシップを発揮する時です。持久力で困難を乗り越えます。',
                'reversed': '力の乱用や独裁的傾向。安定性の欠如や正義への背反。リーダーシップの放棄があります。',
            },
            'psychological': '自己権威の確立。強靭な精神力と持久力の発達。',
            'spiritual': '霊的な王権の獲得。神聖な正義と秩序の体現。',
        },
        'correspondences': {
            'color': '深緑・金色',
            'direction': '中央',
            'sound': 'd音、雷鳴',
            'number': 7,
            'ogham_group': 'aicme2',
        },
    },
    {
        'symbol': 'ᚈ',
        'name': 'Tinne',
        'transcription': 'T',
        'tree': 'Holly',
        'tree_genus': 'Ilex aquifolium',
        'element': 'fire',
        'timing': {
            'months': '7月8日 - 8月4日',
            'season': '盛夏',
            'festivals': ['Lughnasadh前期'],
        },
        'meanings': {
            'keywords': ['バランス', '正義', '主権', '勇気', '犠牲'],
            'divinatory': {
                'upright': 'バランスと正義の力が働きます。主権を握り、勇気ある決断を下す時です。必要な犠牲を払う覚悟があります。',
                'reversed': 'バランスの崩れや不正義。主権の濫用や勇気の欠如。不要な犠牲を強いられています。',
            },
            'psychological': '内的バランスの確立。正義感と公正性の発達。',
            'spiritual': '霊的な主権と責任の自覚。犠牲と奉仕の精神の体現。',
        },
        'correspondences': {
            'color': '深紅・緑',
            'direction': '南西',
            'sound': 't音、木が燃える音',
            'number': 8,
            'ogham_group': 'aicme2',
        },
    },
    {
        'symbol': 'ᚉ',
        'name': 'Coll',
        'transcription': 'C/K',
        'tree': 'Hazel',
        'tree_genus': 'Corylus avellana',
        'element': 'air',
        'timing': {
            'months': '8月5日 - 9月1日',
            'season': '晩夏',
            'festivals': ['Lughnasadh', '収穫祭'],
        },
        'meanings': {
            'keywords': ['知恵', '直感', '霊感', '詩的洞察', '占い'],
            'divinatory': {
                'upright': '深い知恵と霊感が授けられます。詩的な洞察力が冴え、占いや予言的能力が高まります。内なる智慧の泉が開かれます。',
                'reversed': '知恵の乱用や直感への不信。霊感の混乱や誤った洞察。智慧の源が濁っています。',
            },
            'psychological': '直感的知性の発達。創造的洞察力の開花。',
            'spiritual': '霊感と予言能力の覚醒。宇宙の智慧との直接的交流。',
        },
        'correspondences': {
            'color': '金色・茶色',
            'direction': '北東',
            'sound': 'c音、木の実が落ちる音',
            'number': 9,
            'ogham_group': 'aicme2',
        },
    },
    {
        'symbol': 'ᚊ',
        'name': 'Quert',
        'transcription': 'Q',
        'tree': 'Apple',
        'tree_genus': 'Malus domestica',
        'element': 'water',
        'timing': {
            'months': '9月2日 - 9月29日',
            'season': '初秋',
            'festivals': ['Mabon前期', '秋分前'],
        },
        'meanings': {
            'keywords': ['愛', '選択', '誘惑', '不老不死', '魂の旅'],
            'divinatory': {
                'upright': '愛と美の力が働きます。重要な選択の時期で、魂の成長につながる決断が求められます。永遠の愛や不老不死の智慧が得られます。',
                'reversed': '誘惑に負けるか、間違った選択をする危険。愛への恐れや美の軽視。魂の旅路での迷いがあります。',
            },
            'psychological': '愛と選択の心理学。美への感受性の発達。',
            'spiritual': '魂の不滅性の認識。愛による霊的変容の体験。',
        },
        'correspondences': {
            'color': '薄ピンク・金色',
            'direction': '西',
            'sound': 'qu音、甘い香りの風',
            'number': 10,
            'ogham_group': 'aicme2',
        },
    },
    {
        'symbol': 'ᚋ',
        'name': 'Muin',
        'transcription': 'M',
        'tree': 'Vine',
        'element': 'water',
        'timing': {
            'months': '9月2日 - 9月29日',
            'season': '初秋',
        },
        'meanings': {
            'keywords': ['収穫', '予言', '真実', '内省'],
            'divinatory': {
                'upright': '実りの時。内なる真実が明らかになり、直感が冴えわたります。',
                'reversed': '過度な享楽や自己欺瞞に注意。真実から目を逸らしています。',
            },
            'psychological': '抑圧していた感情と向き合い、本音を受け入れる段階。',
            'spiritual': '予言的な洞察と霊的な陶酔。',
        },
        'correspondences': {
            'color': '紫・葡萄色',
            'direction': '西',
            'number': 11,
            'ogham_group': 'aicme3',
        },
    },
    {
        'symbol': 'ᚌ',
        'name': 'Gort',
        'transcription': 'G',
        'tree': 'Ivy',
        'element': 'water',
        'timing': {
            'months': '9月30日 - 10月27日',
            'season': '秋',
        },
        'meanings': {
            'keywords': ['忍耐', '成長', '結びつき', '螺旋'],
            'divinatory': {
                'upright': '粘り強さが実を結びます。螺旋を描くように着実に成長しています。',
                'reversed': '依存や束縛に注意。絡みついた関係を見直しましょう。',
            },
            'psychological': '自己探求の螺旋を辿り、中心へと近づく過程。',
            'spiritual': '魂の探求と忍耐による霊的成長。',
        },
        'correspondences': {
            'color': '空色',
            'direction': '北西',
            'number': 12,
            'ogham_group': 'aicme3',
        },
    },
    {
        'symbol': 'ᚍ',
        'name': 'nGeatal',
        'transcription': 'NG',
        'tree': 'Reed',
        'element': 'air',
        'timing': {
            'months': '10月28日 - 11月24日',
            'season': '晩秋',
        },
        'meanings': {
            'keywords': ['行動', '方向', '調和', '伝達'],
            'divinatory': {
                'upright': '目的に向かってまっすぐ進む時。言葉と行動が調和します。',
                'reversed': '方向性を見失い、エネルギーが散漫になっています。',
            },
            'psychological': '意識の焦点を定め、意志を一本に通す段階。',
            'spiritual': '祖先とのつながりと死者の知恵。',
        },
        'correspondences': {
            'color': '緑',
            'direction': '北',
            'number': 13,
            'ogham_group': 'aicme3',
        },
    },
    {
        'symbol': 'ᚎ',
        'name': 'Straif',
        'transcription': 'ST',
        'tree': 'Blackthorn',
        'element': 'fire',
        'timing': {
            'months': '11月',
            'season': '晩秋',
        },
        'meanings': {
            'keywords': ['試練', '運命', '強制', '浄化'],
            'divinatory': {
                'upright': '避けられない変化が訪れます。試練を通じて強さを得る時です。',
                'reversed': '抵抗が苦しみを長引かせています。流れを受け入れましょう。',
            },
            'psychological': '影の部分と向き合い、痛みを力に変える過程。',
            'spiritual': '運命の力と浄化の炎。',
        },
        'correspondences': {
            'color': '紫黒',
            'direction': '北',
            'number': 14,
            'ogham_group': 'aicme3',
        },
    },
    {
        'symbol': 'ᚏ',
        'name': 'Ruis',
        'transcription': 'R',
        'tree': 'Elder',
        'element': 'water',
        'timing': {
            'months': '11月25日 - 12月22日',
            'season': '冬至前',
        },
        'meanings': {
            'keywords': ['終わりと始まり', '再生', '成熟', '変容'],
            'divinatory': {
                'upright': '一つのサイクルの完結。終わりは新しい始まりの準備です。',
                'reversed': '過去を手放せず、変化を拒んでいます。',
            },
            'psychological': '経験を統合し、成熟へ向かう段階。',
            'spiritual': '死と再生の神秘。',
        },
        'correspondences': {
            'color': '血赤',
            'direction': '北',
            'number': 15,
            'ogham_group': 'aicme3',
        },
    },
    {
        'symbol': 'ᚐ',
        'name': 'Ailm',
        'transcription': 'A',
        'tree': 'Silver Fir',
        'element': 'air',
        'timing': {
            'months': '冬至',
            'season': '冬',
        },
        'meanings': {
            'keywords': ['高い視点', '明晰', '癒し', '展望'],
            'divinatory': {
                'upright': '高い視点から全体を見渡す時。明晰な判断ができます。',
                'reversed': '視野が狭くなっています。一歩引いて状況を見直して。',
            },
            'psychological': '俯瞰する意識の獲得。',
            'spiritual': '高次の自己との接続と魂の癒し。',
        },
        'correspondences': {
            'color': '淡い青',
            'direction': '東',
            'number': 16,
            'ogham_group': 'aicme4',
        },
    },
    {
        'symbol': 'ᚑ',
        'name': 'Onn',
        'transcription': 'O',
        'tree': 'Gorse',
        'element': 'fire',
        'timing': {
            'months': '春分',
            'season': '春',
        },
        'meanings': {
            'keywords': ['希望', '情熱', '豊かさ', '集積'],
            'divinatory': {
                'upright': '希望の光が輝きます。情熱を注げば豊かさが集まります。',
                'reversed': '目標が散らばり、エネルギーを消耗しています。',
            },
            'psychological': '内なる情熱の再点火。',
            'spiritual': '太陽の力と不屈の希望。',
        },
        'correspondences': {
            'color': '金色',
            'direction': '南',
            'number': 17,
            'ogham_group': 'aicme4',
        },
    },
    {
        'symbol': 'ᚒ',
        'name': 'Ur',
        'transcription': 'U',
        'tree': 'Heather',
        'element': 'earth',
        'timing': {
            'months': '夏至',
            'season': '夏',
        },
        'meanings': {
            'keywords': ['癒し', '夢', '情熱', 'つながり'],
            'divinatory': {
                'upright': '心身の癒しと喜びの時。夢が現実とつながります。',
                'reversed': '現実から逃避しがちです。地に足をつけて。',
            },
            'psychological': '肉体と精神の統合。',
            'spiritual': '異界との扉と夢の智慧。',
        },
        'correspondences': {
            'color': '紫',
            'direction': '南西',
            'number': 18,
            'ogham_group': 'aicme4',
        },
    },
    {
        'symbol': 'ᚓ',
        'name': 'Eadhadh',
        'transcription': 'E',
        'tree': 'Aspen',
        'element': 'air',
        'timing': {
            'months': '秋分',
            'season': '秋',
        },
        'meanings': {
            'keywords': ['恐れの克服', '勇気', '試練', '変化'],
            'divinatory': {
                'upright': '恐れを乗り越える勇気が湧いてきます。困難は一時的です。',
                'reversed': '不安に支配されています。小さな一歩から始めましょう。',
            },
            'psychological': '恐れと向き合い、内なる抵抗を手放す過程。',
            'spiritual': '風の声を聴く霊的な感受性。',
        },
        'correspondences': {
            'color': '銀白',
            'direction': '西',
            'number': 19,
            'ogham_group': 'aicme4',
        },
    },
    {
        'symbol': 'ᚔ',
        'name': 'Iodhadh',
        'transcription': 'I',
        'tree': 'Yew',
        'element': 'earth',
        'timing': {
            'months': '冬至前夜',
            'season': '冬',
        },
        'meanings': {
            'keywords': ['永遠', '死と再生', '祖先', '変容'],
            'divinatory': {
                'upright': '根本的な変容の時。古いものが終わり、永続する何かが始まります。',
                'reversed': '変化への恐れが停滞を生んでいます。',
            },
            'psychological': '自我の死と再誕生。',
            'spiritual': '祖先の智慧と永遠の生命。',
        },
        'correspondences': {
            'color': '暗緑',
            'direction': '北',
            'number': 20,
            'ogham_group': 'aicme4',
        },
    },
]

OGHAM_SPREADS = [
    {
        'id': 'single-ogham',
        'name': '単一オガム',
        'description': '一つの質問に対する直接的な答え',
        'positions': [
            {
                'number': 1,
                'name': '神託',
                'meaning': 'ケルトの古代智慧からの直接的なメッセージ',
                'element': 'spirit',
            },
        ],
        'complexity': 'simple',
        'purpose': 'シンプルな質問への明確な答え',
    },
    {
        'id': 'three-realms',
        'name': '三界（陸・海・空）',
        'description': 'ケルトの三つの世界からの洞察',
        'positions': [
            {
                'number': 1,
                'name': '陸界（ティル）',
                'meaning': '物質世界・現実的な側面',
                'element': 'earth',
                'time_frame': 'present',
            },
            {
                'number': 2,
                'name': '海界（ムーア）',
                'meaning': '感情・直感・無意識の世界',
                'element': 'water',
                'time_frame': 'past',
            },
            {
                'number': 3,
                'name': '空界（ネイヴ）',
                'meaning': '霊的世界・高次の意識',
                'element': 'air',
                'time_frame': 'future',
            },
        ],
        'complexity': 'intermediate',
        'purpose': '包括的な人生状況の分析',
    },
    {
        'id': 'four-elements',
        'name': '四大元素',
        'description': 'ケルトの四大元素による完全な分析',
        'positions': [
            {
                'number': 1,
                'name': '火（テイン）',
                'meaning': '情熱・行動・創造力',
                'element': 'fire',
                'direction': '南',
            },
            {
                'number': 2,
                'name': '水（ウィスケ）',
                'meaning': '感情・直感・浄化',
                'element': 'water',
                'direction': '西',
            },
            {
                'number': 3,
                'name': '風（ガエス）',
                'meaning': '思考・コミュニケーション・変化',
                'element': 'air',
                'direction': '東',
            },
            {
                'number': 4,
                'name': '地（タラウ）',
                'meaning': '安定・実現・物質的基盤',
                'element': 'earth',
                'direction': '北',
            },
        ],
        'complexity': 'intermediate',
        'purpose': 'エレメンタルバランスの調査',
    },
    {
        'id': 'sacred-grove',
        'name': '聖なる森',
        'description': '五つのオガム文字による深い洞察',
        'positions': [
            {
                'number': 1,
                'name': '根（フレーフ）',
                'meaning': '過去の影響・基盤・源',
                'element': 'earth',
                'time_frame': 'past',
            },
            {
                'number': 2,
                'name': '幹（クラン）',
                'meaning': '現在の状況・核心',
                'element': 'earth',
                'time_frame': 'present',
            },
            {
                'number': 3,
                'name': '枝（ゲーグ）',
                'meaning': '可能性・選択肢',
                'element': 'air',
                'time_frame': 'future',
            },
            {
                'number': 4,
                'name': '葉（ドゥイレ）',
                'meaning': '表面的な状況・見た目',
                'element': 'air',
                'time_frame': 'present',
            },
            {
                'number': 5,
                'name': '花実（ブラース）',
                'meaning': '最終結果・収穫',
                'element': 'water',
                'time_frame': 'future',
            },
        ],
        'complexity': 'advanced',
        'purpose': '複雑な状況の深層分析',
    },
    {
        'id': 'druid-wheel',
        'name': 'ドルイドの車輪',
        'description': '八つの方位による完全な人生分析',
        'positions': [
            {
                'number': 1,
                'name': '東（初春）',
                'meaning': '新しい始まり・希望',
                'element': 'air',
                'direction': '東',
            },
            {
                'number': 2,
                'name': '南東（晩春）',
                'meaning': '成長・発展',
                'element': 'fire',
                'direction': '南東',
            },
            {
                'number': 3,
                'name': '南（盛夏）',
                'meaning': '完全な力・達成',
                'element': 'fire',
                'direction': '南',
            },
            {
                'number': 4,
                'name': '南西（晩夏）',
                'meaning': '成熟・責任',
                'element': 'earth',
                'direction': '南西',
            },
            {
                'number': 5,
                'name': '西（初秋）',
                'meaning': '収穫・内省',
                'element': 'earth',
                'direction': '西',
            },
            {
                'number': 6,
                'name': '北西（晩秋）',
                'meaning': '手放し・浄化',
                'element': 'water',
                'direction': '北西',
            },
            {
                'number': 7,
                'name': '北（冬）',
                'meaning': '休息・智慧',
                'element': 'water',
                'direction': '北',
            },
            {
                'number': 8,
                'name': '北東（晩冬）',
                'meaning': '準備・瞑想',
                'element': 'air',
                'direction': '北東',
            },
        ],
        'complexity': 'advanced',
        'purpose': '人生の完全なサイクル分析',
    },
]

# 八大祝祭（キーは祝祭名のまま）
CELTIC_FESTIVALS = {
    'Samhain': {
        'date': '10/31-11/1',
        'ogham': ['ᚍ', 'ᚏ'],
        'meaning': '死と再生の境界',
    },
    'Yule': {
        'date': '12/20-23',
        'ogham': ['ᚁ'],
        'meaning': '光の再生',
    },
    'Imbolc': {
        'date': '2/1-2',
        'ogham': ['ᚂ', 'ᚃ'],
        'meaning': '浄化と保護',
    },
    'Ostara': {
        'date': '3/20-23',
        'ogham': ['ᚄ'],
        'meaning': 'バランスと直感',
    },
    'Beltane': {
        'date': '4/30-5/1',
        'ogham': ['ᚅ', 'ᚆ'],
        'meaning': '聖なる結婚',
    },
    'Litha': {
        'date': '6/20-23',
        'ogham': ['ᚇ'],
        'meaning': '力の頂点',
    },
    'Lughnasadh': {
        'date': '8/1-2',
        'ogham': ['ᚈ', 'ᚉ'],
        'meaning': '収穫と智慧',
    },
    'Mabon': {
        'date': '9/20-23',
        'ogham': ['ᚊ'],
        'meaning': '愛と選択の収穫',
    },
}

# ケルト樹木暦（13の月と名もなき日）: (開始月, 開始日, オガム名)
CELTIC_TREE_CALENDAR = [
    (12, 24, 'Beith'),
    (1, 21, 'Luis'),
    (2, 18, 'Nion'),
    (3, 18, 'Fearn'),
    (4, 15, 'Saille'),
    (5, 13, 'Huathe'),
    (6, 10, 'Duir'),
    (7, 8, 'Tinne'),
    (8, 5, 'Coll'),
    (9, 2, 'Muin'),
    (9, 30, 'Gort'),
    (10, 28, 'nGeatal'),
    (11, 25, 'Ruis'),
]

_FEWS_BY_NAME = {few['name']: few for few in OGHAM_FEWS}
_SPREADS_BY_ID = {spread['id']: spread for spread in OGHAM_SPREADS}


def get_few(name: str) -> Optional[Dict]:
    return _FEWS_BY_NAME.get(name)


def get_ogham_spread(spread_id: str) -> Optional[Dict]:
    return _SPREADS_BY_ID.get(spread_id)
