"""オーラソーマのイクイリブリアムボトルと色のデータ"""

BOTTLES = [
    {'number': 0, 'name': 'スピリチュアルレスキュー', 'upper': 'ロイヤルブルー', 'lower': 'ディープマゼンタ',
     'keywords': ['救済', '臨在', '深い癒し', '霊的目覚め'],
     'affirmation': '私はいつもこの瞬間に在る',
     'message': '深い霊的な救済と変容の時。内なる叡智に従い、新たな始まりを迎える準備ができています。'},
    {'number': 1, 'name': 'フィジカルレスキュー', 'upper': 'ブルー', 'lower': 'ディープマゼンタ',
     'keywords': ['肉体的救済', 'コミュニケーション', '自己表現', '真実'],
     'affirmation': '私は愛をもって真実を伝える',
     'message': 'あなたの真実を愛をもって表現する時。現実を創造する力を取り戻します。'},
    {'number': 4, 'name': 'サンライトボトル', 'upper': 'イエロー', 'lower': 'ゴールド',
     'keywords': ['太陽の光', '知恵', '喜び', '自信'],
     'affirmation': '私は世界に光と喜びをもたらす',
     'message': '内なる太陽が輝く時。あなたの知恵と喜びが周囲を照らします。'},
    {'number': 11, 'name': '花の鎖', 'upper': 'クリア', 'lower': 'ピンク',
     'keywords': ['無条件の愛', 'つながり', '自己愛', '浄化'],
     'affirmation': '私は愛を受け取り、分かち合う',
     'message': '花の鎖のように、愛が繋がり広がる時。自己愛から始まる愛が世界を変えます。'},
    {'number': 22, 'name': '再誕生者のボトル', 'upper': 'イエロー', 'lower': 'ピンク',
     'keywords': ['再生', '新しい始まり', '知恵と愛', '目覚め'],
     'affirmation': '私は新しい人生の章を喜んで迎える',
     'message': '再誕生の扉が開かれています。知恵と愛を統合し、新しい章を始める準備ができました。'},
    {'number': 26, 'name': 'エーテリックレスキュー', 'upper': 'オレンジ', 'lower': 'オレンジ',
     'keywords': ['ショックの解放', '創造性', '感情の流れ', '自立'],
     'affirmation': '私は過去の衝撃を手放す',
     'message': 'エーテル体レベルでの深い癒しが起こっています。感情の自由な流れを許しましょう。'},
    {'number': 32, 'name': 'ソフィア', 'upper': 'ロイヤルブルー', 'lower': 'ゴールド',
     'keywords': ['神聖な知恵', '内なる教師', '洞察', '真理'],
     'affirmation': '私は内なる知恵の声に耳を傾ける',
     'message': 'ソフィア（神聖な知恵）があなたと共にあります。内なる教師の声に耳を傾けてください。'},
    {'number': 44, 'name': 'ガーディアンエンジェル', 'upper': 'ペールブルー', 'lower': 'ペールピンク',
     'keywords': ['守護', '安心', '優しさ', '信頼'],
     'affirmation': '私は愛と保護に包まれている',
     'message': '守護天使があなたを見守っています。安心して人生を歩むことができます。'},
    {'number': 50, 'name': 'エルモリヤ', 'upper': 'ペールブルー', 'lower': 'ペールブルー',
     'keywords': ['神聖な意志', '明け渡し', '平和', '導き'],
     'affirmation': '私は大いなる意志を信頼する',
     'message': '神聖な意志に明け渡し、真のリーダーシップを発揮してください。'},
    {'number': 55, 'name': 'キリスト', 'upper': 'クリア', 'lower': 'レッド',
     'keywords': ['天と地の統合', '情熱', '変容', '顕現'],
     'affirmation': '私は天と地をつなぐ',
     'message': '天と地を繋ぎ、無条件の愛を地上に表す時です。'},
    {'number': 72, 'name': 'クラウン（道化師）', 'upper': 'ブルー', 'lower': 'オレンジ',
     'keywords': ['遊び心', '喜び', '表現', '仮面を外す'],
     'affirmation': '私は人生を遊び、喜びを表現する',
     'message': '内なる道化師が目覚めています。喜びを表現し、創造性を解放しましょう。'},
    {'number': 78, 'name': 'クラウンレスキュー', 'upper': 'バイオレット', 'lower': 'ディープマゼンタ',
     'keywords': ['高次の意識', '霊的保護', '統合', '献身'],
     'affirmation': '私は高次の意識とつながっている',
     'message': 'クラウンチャクラが活性化し、神聖な接続が強まっています。'},
    {'number': 87, 'name': '愛の叡智', 'upper': 'ペールコーラル', 'lower': 'ペールコーラル',
     'keywords': ['相互依存', '愛と知恵', '受容', '女性性'],
     'affirmation': '私は愛と知恵を統合する',
     'message': '愛と知恵が統合される時。深い知恵を世界にもたらします。'},
    {'number': 91, 'name': '女性的リーダーシップ', 'upper': 'ペールオリーブ', 'lower': 'ペールオリーブ',
     'keywords': ['新しいリーダーシップ', '希望', '直観', '調和'],
     'affirmation': '私はハートと直観に従って導く',
     'message': '新しい形のリーダーシップが生まれています。ハートと直観を信頼してください。'},
    {'number': 100, 'name': '大天使メタトロン', 'upper': 'クリア', 'lower': 'ディープマゼンタ',
     'keywords': ['宇宙の秩序', '光', '目覚め', '細部への愛'],
     'affirmation': '私は光の存在として目覚める',
     'message': '宇宙の秩序と調和し、光の存在として目覚める時です。'},
    {'number': 106, 'name': '大天使ラツィエル', 'upper': 'ペールオリーブ', 'lower': 'ペールピンク',
     'keywords': ['神秘', '隠された真実', '理解', '愛の視点'],
     'affirmation': '私は愛の視点で世界を見る',
     'message': '神秘の扉が開きます。隠された真実を理解し、愛の視点で世界を見つめてください。'},
    {'number': 110, 'name': '大天使アンブリエル', 'upper': 'ペールピンク', 'lower': 'ディープマゼンタ',
     'keywords': ['コミュニケーション', '愛', '喜び', '放射'],
     'affirmation': '私は愛と喜びを放射する',
     'message': '内なる太陽を輝かせ、愛と喜びを世界に放射してください。'},
    {'number': 111, 'name': '大天使ダニエル', 'upper': 'ロイヤルブルー', 'lower': 'オリーブ',
     'keywords': ['真実', '慈悲', '正義', 'バランス'],
     'affirmation': '私は慈悲の心で真実を生きる',
     'message': '慈悲の心で正義を実現し、バランスを回復してください。'},
    {'number': 112, 'name': '大天使イスラフェル', 'upper': 'ターコイズ', 'lower': 'バイオレット',
     'keywords': ['音楽', '創造的表現', '癒し', '天上の響き'],
     'affirmation': '私は魂の歌を響かせる',
     'message': '心の奥の歌が目覚めています。創造的な表現で世界を癒しましょう。'},
]

# 色の意味。warmは暖色かどうか（Noneは中立）
COLORS = {
    'レッド': {'chakra': '第1チャクラ', 'warm': True, 'complementary': 'グリーン',
              'keywords': ['生命力', '情熱', '行動', 'グラウンディング'],
              'balanced': ['健全な自己主張', '生きる喜び', '実行力']},
    'ピンク': {'chakra': '第4チャクラ', 'warm': True, 'complementary': 'オリーブ',
              'keywords': ['無条件の愛', '優しさ', '受容', '女性性'],
              'balanced': ['健全な愛情', '自己受容', '母性']},
    'コーラル': {'chakra': '第2チャクラ', 'warm': True, 'complementary': 'ターコイズ',
                'keywords': ['相互依存', '協力', '新しい愛', '統合'],
                'balanced': ['健全な相互関係', '自立した愛']},
    'オレンジ': {'chakra': '第2チャクラ', 'warm': True, 'complementary': 'ブルー',
                'keywords': ['喜び', '創造性', 'ショックの解放', '自立'],
                'balanced': ['感情の自由', '遊び心', '洞察']},
    'ゴールド': {'chakra': '第3チャクラ', 'warm': True, 'complementary': 'ロイヤルブルー',
                'keywords': ['知恵', '豊かさ', '自己価値', '深い喜び'],
                'balanced': ['内なる知恵', '自信', '豊かさの受容']},
    'イエロー': {'chakra': '第3チャクラ', 'warm': True, 'complementary': 'バイオレット',
                'keywords': ['知性', '喜び', '自信', '明晰さ'],
                'balanced': ['明るさ', '知識の吸収', '自尊心']},
    'オリーブ': {'chakra': '第4チャクラ', 'warm': False, 'complementary': 'ピンク',
                'keywords': ['希望', '女性的リーダーシップ', '調和', '再生'],
                'balanced': ['柔らかな強さ', '希望', '自分らしい道']},
    'グリーン': {'chakra': '第4チャクラ', 'warm': False, 'complementary': 'レッド',
                'keywords': ['調和', '空間', '真実の探求', '自然'],
                'balanced': ['心の余裕', '決断力', '自然とのつながり']},
    'ターコイズ': {'chakra': '第4チャクラ', 'warm': False, 'complementary': 'コーラル',
                  'keywords': ['コミュニケーション', '創造的表現', '個性', 'メディア'],
                  'balanced': ['自由な表現', '心からの言葉', '独立']},
    'ブルー': {'chakra': '第5チャクラ', 'warm': False, 'complementary': 'オレンジ',
              'keywords': ['平和', 'コミュニケーション', '信頼', '保護'],
              'balanced': ['穏やかさ', '誠実な言葉', '信頼']},
    'ロイヤルブルー': {'chakra': '第6チャクラ', 'warm': False, 'complementary': 'ゴールド',
                      'keywords': ['直観', '洞察', '権威', '内なるビジョン'],
                      'balanced': ['深い理解', '明確なビジョン', '静けさ']},
    'バイオレット': {'chakra': '第7チャクラ', 'warm': False, 'complementary': 'イエロー',
                    'keywords': ['霊性', '変容', '癒し', '奉仕'],
                    'balanced': ['霊的な成長', '癒しの力', '献身']},
    'ディープマゼンタ': {'chakra': '第8チャクラ', 'warm': True, 'complementary': 'グリーン',
                        'keywords': ['日常の中の神聖', '細部への愛', '奉仕', '地に足のついた霊性'],
                        'balanced': ['小さなことへの愛', '献身', '自己へのケア']},
    'クリア': {'chakra': '全チャクラ', 'warm': None, 'complementary': 'クリア',
              'keywords': ['浄化', '光', '理解', '涙の解放'],
              'balanced': ['透明さ', '明晰な理解', '光を放つ']},
}

# 淡色・中間色は基本色に寄せて扱う
TONE_PREFIXES = ('ペール', 'ミッドトーン')

COMBINATIONS = {
    ('ブルー', 'ディープマゼンタ'): '高次の意志と日常の奉仕の統合',
    ('クリア', 'ピンク'): '純粋な愛の表現と自己愛の確立',
    ('イエロー', 'ゴールド'): '知恵と豊かさの統合的表現',
    ('ロイヤルブルー', 'ゴールド'): '内なるビジョンと外的成功の調和',
    ('バイオレット', 'ディープマゼンタ'): '霊的変容と地に足のついた奉仕',
    ('クリア', 'レッド'): '純粋な生命力とグラウンディング',
    ('ブルー', 'オレンジ'): '平和的表現と創造的喜びの融合',
}

POMANDERS = {
    'レッド': ('レッドポマンダー', 'エネルギーを補い、地に足をつける'),
    'ピンク': ('ピンクポマンダー', '自分への優しさを思い出させる'),
    'コーラル': ('コーラルポマンダー', '報われない愛を癒し、自分を大切にする'),
    'オレンジ': ('オレンジポマンダー', 'ショックを和らげ、流れを取り戻す'),
    'ゴールド': ('ゴールドポマンダー', '深い恐れを和らげ、自分の知恵に触れる'),
    'イエロー': ('イエローポマンダー', '不安を和らげ、明るさを取り戻す'),
    'オリーブ': ('オリーブポマンダー', '希望と明確な方向性をもたらす'),
    'グリーン': ('エメラルドグリーンポマンダー', '心の空間を広げ、決断を助ける'),
    'ターコイズ': ('ターコイズポマンダー', '心からのコミュニケーションを助ける'),
    'ブルー': ('サファイアブルーポマンダー', '安らぎと保護をもたらす'),
    'ロイヤルブルー': ('ロイヤルブルーポマンダー', '感覚を研ぎ澄まし、直観を高める'),
    'バイオレット': ('バイオレットポマンダー', '霊的なつながりと癒しを深める'),
    'ディープマゼンタ': ('ディープマゼンタポマンダー', '日常の小さなことに愛を注ぐ'),
    'クリア': ('オリジナルホワイトポマンダー', 'オーラを浄化し、光で満たす'),
}

POSITIONS = [
    ('soul', '魂のボトル', 'あなたの魂の本質と生まれ持った才能'),
    ('gift', '課題とギフトのボトル', '成長のための課題と、その奥にある天賦の才'),
    ('present', '今ここのボトル', '現在のあなたが取り組んでいるテーマ'),
    ('future', '未来のボトル', 'あなたが向かっている未来の可能性'),
]
