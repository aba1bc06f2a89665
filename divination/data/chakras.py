"""7つのチャクラのデータ"""

CHAKRAS = [
    {
        'number': 1, 'name': '第1チャクラ（ルート）', 'sanskrit': 'Muladhara', 'location': '尾骨',
        'color': '赤', 'element': 'earth', 'sound': 'LAM', 'frequency': 396, 'petals': 4,
        'mantra': '私は安全で守られている',
        'keywords': ['生存', '安心', 'グラウンディング', '安定', '土台'],
        'organs': ['脊椎', '腎臓', '脚', '足', '免疫系'],
        'imbalance': {
            'overactive': ['物質への執着', '貪欲', '安全への過剰なこだわり', '変化への抵抗'],
            'underactive': ['恐れ', '不安', '落ち着きのなさ', '孤立感'],
            'blocked': ['金銭的な困難', '食生活の乱れ', '腰痛'],
        },
        'stones': ['レッドジャスパー', 'ヘマタイト', 'ブラックトルマリン', 'ガーネット'],
        'oils': ['パチュリ', 'シダーウッド', 'サンダルウッド', 'ベチバー'],
        'yoga': ['山のポーズ', '戦士のポーズI', '橋のポーズ', 'チャイルドポーズ'],
        'affirmations': ['私は大地に根ざしている', '私は安全である', '私は人生を信頼する', '私には必要なものがすべてある'],
    },
    {
        'number': 2, 'name': '第2チャクラ（仙骨）', 'sanskrit': 'Svadhisthana', 'location': '下腹部',
        'color': 'オレンジ', 'element': 'water', 'sound': 'VAM', 'frequency': 417, 'petals': 6,
        'mantra': '私は感じ、創造する',
        'keywords': ['創造性', '感情', '喜び', '親密さ', '流れ'],
        'organs': ['生殖器', '膀胱', '腎臓', '腰', '股関節'],
        'imbalance': {
            'overactive': ['感情の起伏', '依存', '快楽への耽溺', '境界線の欠如'],
            'underactive': ['無感動', '創造性の低下', '喜びの欠如', '親密さへの恐れ'],
            'blocked': ['生殖器系の不調', '腰の痛み', '泌尿器の不調'],
        },
        'stones': ['カーネリアン', 'オレンジカルサイト', 'ムーンストーン', 'サンストーン'],
        'oils': ['イランイラン', 'オレンジ', 'ジャスミン', 'ネロリ'],
        'yoga': ['女神のポーズ', '鳩のポーズ', '合せきのポーズ', '骨盤回し'],
        'affirmations': ['私は創造的である', '私は喜びを受け取る', '私の感情は自由に流れる', '私は人生を楽しむ'],
    },
    {
        'number': 3, 'name': '第3チャクラ（太陽神経叢）', 'sanskrit': 'Manipura', 'location': 'みぞおち',
        'color': '黄', 'element': 'fire', 'sound': 'RAM', 'frequency': 528, 'petals': 10,
        'mantra': '私は行動し、実現する',
        'keywords': ['意志', '自信', '個人の力', '決断', '変容'],
        'organs': ['胃', '肝臓', '膵臓', '小腸', '胆のう'],
        'imbalance': {
            'overactive': ['支配欲', '怒り', '完璧主義', '攻撃性'],
            'underactive': ['自信のなさ', '優柔不断', '無力感', '依存心'],
            'blocked': ['消化器の不調', '慢性疲労', '血糖値の乱れ'],
        },
        'stones': ['シトリン', 'タイガーアイ', 'イエロージャスパー', 'アンバー'],
        'oils': ['レモン', 'ジンジャー', 'ベルガモット', 'ペパーミント'],
        'yoga': ['舟のポーズ', '弓のポーズ', '戦士のポーズIII', 'ねじりのポーズ'],
        'affirmations': ['私は力強い', '私は自分を信じる', '私は自分で選択する', '私は目標を実現する'],
    },
    {
        'number': 4, 'name': '第4チャクラ（ハート）', 'sanskrit': 'Anahata', 'location': '胸の中央',
        'color': '緑', 'element': 'air', 'sound': 'YAM', 'frequency': 639, 'petals': 12,
        'mantra': '私は愛し、愛される',
        'keywords': ['愛', '思いやり', '許し', '調和', 'つながり'],
        'organs': ['心臓', '肺', '胸腺', '腕', '手'],
        'imbalance': {
            'overactive': ['自己犠牲', '嫉妬', '共依存', '過度な世話焼き'],
            'underactive': ['孤独', '冷淡さ', '許せない気持ち', '愛への恐れ'],
            'blocked': ['心臓や循環器の不調', '呼吸の浅さ', '肩や背中の緊張'],
        },
        'stones': ['ローズクォーツ', 'グリーンアベンチュリン', 'エメラルド', 'マラカイト'],
        'oils': ['ローズ', 'ラベンダー', 'ゼラニウム', 'ベルガモット'],
        'yoga': ['ラクダのポーズ', 'コブラのポーズ', '魚のポーズ', 'キャット＆カウ'],
        'affirmations': ['私は愛に満ちている', '私は自分と他者を許す', '私は心を開く', '私は愛を受け取る'],
    },
    {
        'number': 5, 'name': '第5チャクラ（喉）', 'sanskrit': 'Vishuddha', 'location': '喉',
        'color': '青', 'element': 'ether', 'sound': 'HAM', 'frequency': 741, 'petals': 16,
        'mantra': '私は真実を語る',
        'keywords': ['表現', 'コミュニケーション', '真実', '傾聴', '創造的表現'],
        'organs': ['喉', '甲状腺', '首', '口', '耳'],
        'imbalance': {
            'overactive': ['話しすぎ', '批判的な言葉', '聞く力の欠如', '噂話'],
            'underactive': ['言葉が出ない', '内気', '自己表現の恐れ', '嘘'],
            'blocked': ['喉の痛み', '甲状腺の不調', '首や肩のこり'],
        },
        'stones': ['ラピスラズリ', 'アクアマリン', 'ターコイズ', 'ブルーレースアゲート'],
        'oils': ['ユーカリ', 'ペパーミント', 'カモミール', 'ティーツリー'],
        'yoga': ['肩立ちのポーズ', '鋤のポーズ', '首回し', 'ライオンの呼吸'],
        'affirmations': ['私は真実を表現する', '私の声には価値がある', '私は明確に伝える', '私は耳を傾ける'],
    },
    {
        'number': 6, 'name': '第6チャクラ（第三の目）', 'sanskrit': 'Ajna', 'location': '眉間',
        'color': '藍', 'element': 'light', 'sound': 'OM', 'frequency': 852, 'petals': 2,
        'mantra': '私は見て、理解する',
        'keywords': ['直感', '洞察', 'ビジョン', '想像力', '智慧'],
        'organs': ['目', '脳', '松果体', '額', '神経系'],
        'imbalance': {
            'overactive': ['妄想', '現実逃避', '過度な空想', '集中力の欠如'],
            'underactive': ['直感の鈍さ', '想像力の欠如', '視野の狭さ', '否定'],
            'blocked': ['頭痛', '目の疲れ', '睡眠の乱れ'],
        },
        'stones': ['アメジスト', 'ソーダライト', 'フローライト', 'ラブラドライト'],
        'oils': ['フランキンセンス', 'ローズマリー', 'クラリセージ', 'ジュニパー'],
        'yoga': ['子供のポーズ', 'ダウンドッグ', '前屈', '片鼻呼吸'],
        'affirmations': ['私は直感を信じる', '私は明晰に見る', '私は内なる智慧とつながる', '私の想像力は豊かである'],
    },
    {
        'number': 7, 'name': '第7チャクラ（クラウン）', 'sanskrit': 'Sahasrara', 'location': '頭頂',
        'color': '紫', 'element': 'thought', 'sound': 'AUM', 'frequency': 963, 'petals': 1000,
        'mantra': '私は宇宙とひとつである',
        'keywords': ['霊性', '悟り', '統合', '超越', '宇宙意識'],
        'organs': ['大脳', '頭頂', '中枢神経', '皮膚', '下垂体'],
        'imbalance': {
            'overactive': ['霊的な逃避', '地に足がつかない', '優越感', '現実との断絶'],
            'underactive': ['信仰の喪失', '目的の喪失', '孤立感', '物質主義'],
            'blocked': ['慢性的な頭痛', '光や音への過敏', '抑うつ感'],
        },
        'stones': ['クリアクォーツ', 'アメジスト', 'セレナイト', 'ムーンストーン'],
        'oils': ['フランキンセンス', 'ロータス', 'サンダルウッド', 'ラベンダー'],
        'yoga': ['頭立ちのポーズ', '蓮華座', '屍のポーズ', '瞑想'],
        'affirmations': ['私は神聖な存在とつながっている', '私は今ここにいる', '私は導かれている', '私は全体の一部である'],
    },
]
