"""タロットカード78枚のデータ"""
from typing import Dict, List, Optional, Union

# 大アルカナ（0-21）
MAJOR_ARCANA = [
    {
        'id': 'fool',
        'name': '愚者',
        'number': 0,
        'arcana': 'major',
        'element': '風',
        'planet': '天王星',
        'keywords': ['新しい始まり', '冒険', '無邪気', '自由'],
        'upright_meaning': '新たな旅立ち、無限の可能性、純粋な心、冒険への意欲',
        'reversed_meaning': '無謀、軽率、リスクの無視、方向性の欠如',
        'description': '崖の端に立つ若者が、太陽に向かって一歩を踏み出そうとしている。白い犬が足元で吠え、注意を促している。',
        'advice': '恐れずに新しいことに挑戦しましょう。しかし、周囲の声にも耳を傾けることを忘れずに。',
        'image_symbols': ['白い太陽', '崖', '白い犬', '花', '袋'],
        'meanings': {
            'upright': {
                'general': '新しい旅の始まり。無限の可能性と純粋な心で未知の世界へ踏み出す時。',
                'love': '新しい恋の始まり。自由な心で相手と向き合い、素直な気持ちを大切に。',
                'career': '新規プロジェクトのチャンス。従来の枠にとらわれない斬新なアイデアが吉。',
                'spirituality': '魂の純粋性を取り戻す時。子供のような無邪気さが悟りへの道を開く。',
            },
            'reversed': {
                'general': '無謀な行動への警告。計画性の欠如や現実逃避に注意が必要。',
                'love': '軽率な恋愛関係。コミットメントへの恐れや責任回避の傾向。',
                'career': 'リスク管理の甘さ。準備不足のまま行動することへの警告。',
                'spirituality': '精神的な迷走。地に足をつけることの重要性。',
            },
        },
    },
    {
        'id': 'magician',
        'name': '魔術師',
        'number': 1,
        'arcana': 'major',
        'element': '全元素',
        'planet': '水星',
        'keywords': ['意志力', '創造', '実現', 'スキル'],
        'upright_meaning': '意志の力、目標達成能力、才能の開花、コミュニケーション',
        'reversed_meaning': '操作、詐欺、才能の浪費、コミュニケーション不足',
        'description': '赤いローブを着た魔術師が、祭壇の前に立ち、片手を天に、もう片手を地に向けている。テーブルには四大元素を表す道具が並ぶ。',
        'advice': 'あなたには必要な全ての道具が揃っています。今こそ行動を起こす時です。',
        'image_symbols': ['無限大記号', 'ワンド', 'カップ', 'ソード', 'ペンタクル'],
        'meanings': {
            'upright': {
                'general': '意志の力で現実を創造する時。全ての要素が揃い、望みを実現できる。',
                'love': '積極的なアプローチが成功を呼ぶ。明確な意図を持って関係を築く。',
                'career': 'スキルと才能を最大限に活用。リーダーシップを発揮する好機。',
                'spirituality': '高次の意志と繋がり、現実世界で具現化する力を得る。',
            },
            'reversed': {
                'general': '才能の誤用や操作的な行動。エゴに支配されている可能性。',
                'love': '相手を操作しようとする傾向。不誠実な態度への警告。',
                'career': '能力の過信や詐欺的行為への注意。スキル不足の自覚が必要。',
                'spirituality': '霊的な力の誤用。謙虚さを取り戻す必要性。',
            },
        },
    },
    {
        'id': 'high-priestess',
        'name': '女教皇',
        'number': 2,
        'arcana': 'major',
        'element': '水',
        'planet': '月',
        'keywords': ['直感', '内なる知恵', '秘密', '受容性'],
        'upright_meaning': '直感力、潜在意識、神秘的な知識、内なる声',
        'reversed_meaning': '秘密の露呈、表面的な判断、直感の無視',
        'description': '青いローブを纏った女性が、黒と白の柱の間に座っている。膝の上にはトーラーの巻物、背後には柘榴の幕。',
        'advice': '答えは既にあなたの内側にあります。静かに瞑想し、内なる声に耳を傾けてください。',
        'image_symbols': ['月の冠', 'トーラー', '黒白の柱', '柘榴', '水'],
        'meanings': {
            'upright': {
                'general': '内なる声に耳を傾ける時。直感と潜在意識からの導きを信頼する。',
                'love': '相手の本質を直感的に理解。言葉にならない感情の交流を大切に。',
                'career': '研究や調査が実を結ぶ。隠れた情報や知識が鍵となる。',
                'spirituality': '高次の知恵との繋がり。瞑想と内省により真理に近づく。',
            },
            'reversed': {
                'general': '直感の無視や表面的な判断。内なる声を聞く余裕がない状態。',
                'love': '感情の抑圧や秘密。本音を隠している関係性への警告。',
                'career': '重要な情報の見落とし。表面的な分析では不十分。',
                'spirituality': '霊的な成長の停滞。日常に埋没し内面を見失っている。',
            },
        },
    },
    {
        'id': 'empress',
        'name': '女帝',
        'number': 3,
        'arcana': 'major',
        'element': '地',
        'planet': '金星',
        'zodiac': '牡牛座',
        'keywords': ['豊穣', '母性', '創造性', '感覚'],
        'upright_meaning': '豊かさ、母性愛、創造力、自然との調和',
        'reversed_meaning': '過保護、創造性の阻害、依存、物質主義',
        'description': '豊かな自然に囲まれ、王座に座る女性。金星のシンボルが描かれた盾を持ち、小麦が実る。',
        'advice': '五感を大切にし、美しいものに囲まれて過ごしましょう。創造的な活動が幸運を呼びます。',
        'image_symbols': ['12の星の冠', '金星記号', '小麦', '滝', 'クッション'],
        'meanings': {
            'upright': {
                'general': '豊かな創造性と育成の時期。愛と美と豊穣のエネルギーに満ちている。',
                'love': '深い愛情と思いやり。関係が成熟し実を結ぶ時期。',
                'career': '創造的プロジェクトの成功。チームを育成し成長させる。',
                'spirituality': '地球との繋がりを感じ、生命力に満ち溢れる。',
            },
            'reversed': {
                'general': '創造性の枯渇や過保護。バランスを失った母性の表れ。',
                'love': '愛情の押し付けや依存関係。相手の自立を妨げる傾向。',
                'career': '創造的な停滞期。過度な管理や干渉が成長を妨げる。',
                'spirituality': '物質主義への偏り。精神性と物質性のバランスが必要。',
            },
        },
    },
    {
        'id': 'emperor',
        'name': '皇帝',
        'number': 4,
        'arcana': 'major',
        'element': '火',
        'planet': '火星',
        'zodiac': '牡羊座',
        'keywords': ['権威', '構造', '統制', '父性'],
        'upright_meaning': '権威、リーダーシップ、安定、保護',
        'reversed_meaning': '暴君、硬直、支配欲、融通の利かなさ',
        'description': '石の王座に座る髭を生やした皇帝。右手に生命のアンク、左手に地球を持つ。背景には荒涼とした山々。',
        'advice': '責任を持って行動し、秩序を作り出しましょう。ただし、柔軟性も忘れずに。',
        'image_symbols': ['羊の頭', 'アンク', '地球', '赤いローブ', '山'],
        'meanings': {
            'upright': {
                'general': '秩序と安定を築く時。リーダーシップと責任を持って状況を統制する。',
                'love': '安定した関係の構築。保護者的な愛情と責任ある態度。',
                'career': '組織での昇進や権限拡大。構造的なアプローチが成功を呼ぶ。',
                'spirituality': '内なる権威の確立。自己規律により精神的成長を遂げる。',
            },
            'reversed': {
                'general': '権力の濫用や過度な支配。柔軟性の欠如と独裁的傾向。',
                'love': '支配的な関係性。相手をコントロールしようとする傾向。',
                'career': '権威主義的な環境。創造性を抑圧する硬直した構造。',
                'spirituality': 'エゴの肥大化。謙虚さと柔軟性を取り戻す必要性。',
            },
        },
    },
    {
        'id': 'hierophant',
        'name': '教皇',
        'number': 5,
        'arcana': 'major',
        'element': '地',
        'planet': '木星',
        'zodiac': '牡牛座',
        'keywords': ['伝統', '精神性', '教え', '慣習'],
        'upright_meaning': '精神的指導、伝統の尊重、高等教育、信念体系',
        'reversed_meaning': '教条主義、非伝統的、反抗、新しい方法',
        'description': '宗教的な衣装を着た教皇が、二人の僧侶の前で祝福を与えている。三重冠を被り、三本の十字架を持つ。',
        'advice': '伝統から学びつつ、自分自身の精神的な道を見つけてください。',
        'image_symbols': ['三重冠', '交差した鍵', '祝福の手', '二本の柱', '僧侶'],
        'meanings': {
            'upright': {
                'general': '伝統的な知恵と教えに従う時。精神的な導きと教育を受ける。',
                'love': '伝統的な価値観に基づく関係。結婚や公式な約束の時期。',
                'career': 'メンターとの出会い。組織の規範に従うことで成功する。',
                'spirituality': '宗教的・精神的な教えとの出会い。師からの導きを受ける。',
            },
            'reversed': {
                'general': '既存の価値観への疑問。独自の道を探す必要性。',
                'love': '型にはまらない関係性。伝統的な結婚観からの脱却。',
                'career': '組織の規範への反発。革新的なアプローチの必要性。',
                'spirituality': '教条主義からの解放。個人的な精神性の探求。',
            },
        },
    },
    {
        'id': 'lovers',
        'name': '恋人',
        'number': 6,
        'arcana': 'major',
        'element': '風',
        'planet': '水星',
        'zodiac': '双子座',
        'keywords': ['愛', '選択', '調和', '価値観'],
        'upright_meaning': '愛、調和、パートナーシップ、重要な選択',
        'reversed_meaning': '不調和、価値観の相違、誘惑、不誠実',
        'description': 'エデンの園で、裸の男女が天使の祝福を受けている。女性の後ろには知恵の木、男性の後ろには生命の木。',
        'advice': '心に従って選択をしましょう。真の調和は、自分自身との調和から始まります。',
        'image_symbols': ['大天使ラファエル', '太陽', '知恵の木', '生命の木', '蛇'],
        'meanings': {
            'upright': {
                'general': '重要な選択の時。価値観に基づいた決断が調和をもたらす。',
                'love': '深い愛の結合。魂のレベルでの繋がりと相互理解。',
                'career': 'パートナーシップの形成。価値観を共有する協力関係。',
                'spirituality': '対極の統合。内なる男性性と女性性のバランス。',
            },
            'reversed': {
                'general': '価値観の不一致や選択の困難。内的葛藤と不調和。',
                'love': '関係性の不均衡。コミュニケーションの欠如や誤解。',
                'career': '協力関係の破綻。利害の対立や方向性の相違。',
                'spirituality': '内的分裂。統合されていない人格の側面。',
            },
        },
    },
    {
        'id': 'chariot',
        'name': '戦車',
        'number': 7,
        'arcana': 'major',
        'element': '水',
        'zodiac': '蟹座',
        'keywords': ['勝利', '意志力', '統御', '前進'],
        'upright_meaning': '勝利、決意、自制心、前進する力',
        'reversed_meaning': '方向性の喪失、攻撃性、自制心の欠如',
        'description': '星の天蓋の下、鎧を着た戦士が黒と白のスフィンクスが引く戦車に乗っている。',
        'advice': '対立する力を統合し、明確な目標に向かって前進しましょう。',
        'image_symbols': ['星の天蓋', 'スフィンクス', '都市', '鎧', '月と星'],
        'meanings': {
            'upright': {
                'general': '意志の力で障害を克服する時。対立する力を統御し前進する。',
                'love': '感情をコントロールし関係を前進させる。困難を乗り越える。',
                'career': '競争での勝利。意志力と決断力で目標を達成する。',
                'spirituality': '低次の衝動を統御し、高次の目的に向かって前進。',
            },
            'reversed': {
                'general': 'コントロールの喪失。方向性を見失い暴走する危険。',
                'love': '感情の制御不能。関係性における力のアンバランス。',
                'career': '過度な競争心。攻撃的すぎる態度が問題を引き起こす。',
                'spirituality': 'エゴの暴走。内なる戦いに疲弊している状態。',
            },
        },
    },
    {
        'id': 'strength',
        'name': '力',
        'number': 8,
        'arcana': 'major',
        'element': '火',
        'zodiac': '獅子座',
        'keywords': ['内なる力', '勇気', '忍耐', '優しさ'],
        'upright_meaning': '内面の強さ、勇気、忍耐力、自信',
        'reversed_meaning': '自信喪失、弱さ、自己疑念、力の乱用',
        'description': '白い衣装の女性が、優しくライオンの口を閉じている。頭上には無限大記号が輝く。',
        'advice': '真の強さは優しさの中にあります。恐れと向き合い、愛で克服しましょう。',
        'image_symbols': ['無限大記号', 'ライオン', '花輪', '山', '白い衣装'],
        'meanings': {
            'upright': {
                'general': '優しさによる真の強さ。内なる獣性を愛と理解で統御する。',
                'love': '愛の力で困難を乗り越える。優しさと忍耐が関係を深める。',
                'career': '柔軟なリーダーシップ。説得力と人間性で成功を収める。',
                'spirituality': '低次の本能を高次の愛で昇華。真の精神的強さの獲得。',
            },
            'reversed': {
                'general': '内なる弱さや自信喪失。本能に支配されている状態。',
                'love': '関係における弱さ。恐れや不安が愛を妨げている。',
                'career': '自信の欠如。困難に立ち向かう勇気が必要。',
                'spirituality': '精神的な弱さ。内なる力を信じられない状態。',
            },
        },
    },
    {
        'id': 'hermit',
        'name': '隠者',
        'number': 9,
        'arcana': 'major',
        'element': '地',
        'planet': '水星',
        'zodiac': '乙女座',
        'keywords': ['内省', '探求', '孤独', '導き'],
        'upright_meaning': '内なる探求、精神的な導き、孤独の知恵、内省',
        'reversed_meaning': '孤立、頑固、現実逃避、助言の拒否',
        'description': '灰色のローブを着た老人が、雪山の頂上でランタンを掲げている。杖を持ち、一人で立つ。',
        'advice': '答えを求めて内側を見つめてください。孤独は深い洞察をもたらします。',
        'image_symbols': ['ランタン', '六芒星', '杖', '雪山', 'グレーのローブ'],
        'meanings': {
            'upright': {
                'general': '内なる光を求めて孤独な探求。深い知恵と洞察を得る時期。',
                'love': '一人の時間が必要。内省により真の愛の意味を理解する。',
                'career': '専門知識の探求。一人で集中して取り組む仕事が実を結ぶ。',
                'spirituality': '魂の暗夜を経て光明を得る。内なる師との出会い。',
            },
            'reversed': {
                'general': '過度な孤立や現実逃避。社会との繋がりを失っている。',
                'love': '孤独への執着。親密さへの恐れが関係を妨げる。',
                'career': 'チームワークの欠如。協力を拒む頑なな態度。',
                'spirituality': '精神的な迷走。導きを求めながら見つからない状態。',
            },
        },
    },
    {
        'id': 'wheel-of-fortune',
        'name': '運命の輪',
        'number': 10,
        'arcana': 'major',
        'element': '火',
        'planet': '木星',
        'keywords': ['運命', '変化', 'サイクル', 'チャンス'],
        'upright_meaning': '幸運、運命的な出来事、転換点、チャンス',
        'reversed_meaning': '不運、抵抗、悪循環、コントロールの喪失',
        'description': '大きな輪が回転し、その周りに神秘的なシンボルと生き物が配置されている。',
        'advice': '変化を受け入れ、流れに身を任せましょう。全ては循環しています。',
        'image_symbols': ['スフィンクス', '蛇', 'アヌビス', 'TARO文字', '四元素記号'],
        'meanings': {
            'upright': {
                'general': '運命の大きな転換点。サイクルの変化と新たな機会の到来。',
                'love': '関係性の転機。運命的な出会いや関係の新段階。',
                'career': '大きなチャンスの到来。運が味方し成功へ向かう。',
                'spirituality': 'カルマの法則の理解。宇宙の流れと調和する。',
            },
            'reversed': {
                'general': '悪循環や停滞。変化への抵抗が状況を悪化させる。',
                'love': '関係の停滞や悪循環。同じパターンの繰り返し。',
                'career': '不運な時期。外的要因による計画の遅延。',
                'spirituality': 'カルマの教訓を学べていない。同じ課題の繰り返し。',
            },
        },
    },
    {
        'id': 'justice',
        'name': '正義',
        'number': 11,
        'arcana': 'major',
        'element': '風',
        'zodiac': '天秤座',
        'keywords': ['公正', 'バランス', '真実', '因果'],
        'upright_meaning': '公正、バランス、真実、正しい判断',
        'reversed_meaning': '不公正、偏見、不誠実、法的問題',
        'description': '王座に座る人物が、右手に剣、左手に天秤を持っている。赤いローブと冠を身に着ける。',
        'advice': '客観的に状況を見つめ、公正な判断を下しましょう。行動には責任が伴います。',
        'image_symbols': ['剣', '天秤', '王座', '紫のベール', '四角い冠'],
        'meanings': {
            'upright': {
                'general': '公正な判断と因果応報。真実が明らかになり正義が為される。',
                'love': 'バランスの取れた関係。誠実さと公平性が重要。',
                'career': '公正な評価と報酬。法的問題での勝利。',
                'spirituality': 'カルマの清算。過去の行いの結果を受け入れる。',
            },
            'reversed': {
                'general': '不公正や偏見。バランスを欠いた判断と不正義。',
                'love': '関係の不均衡。一方的な犠牲や不公平な扱い。',
                'career': '不当な扱いや法的トラブル。偏見による不利益。',
                'spirituality': 'カルマの誤解。被害者意識からの脱却が必要。',
            },
        },
    },
    {
        'id': 'hanged-man',
        'name': '吊られた男',
        'number': 12,
        'arcana': 'major',
        'element': '水',
        'planet': '海王星',
        'keywords': ['犠牲', '視点の転換', '待機', '悟り'],
        'upright_meaning': '自己犠牲、新しい視点、精神的成長、忍耐',
        'reversed_meaning': '無意味な犠牲、停滞、視野の狭さ',
        'description': 'T字型の木に片足で逆さに吊られた男。頭の周りには光輪が輝き、穏やかな表情。',
        'advice': '視点を変えることで、新しい真実が見えてきます。今は待つ時期かもしれません。',
        'image_symbols': ['T字の木', '光輪', '赤いタイツ', '青い上着', '縛られた足'],
        'meanings': {
            'upright': {
                'general': '視点を変えることで新たな理解。一時的な犠牲が大きな悟りをもたらす。',
                'love': '相手のために自我を手放す。無条件の愛の学び。',
                'career': '短期的な損失を受け入れる。長期的視野での判断。',
                'spirituality': 'エゴの死と再生。高次の視点からの理解。',
            },
            'reversed': {
                'general': '無意味な犠牲や停滞。視点の固執による苦しみ。',
                'love': '一方的な犠牲による疲弊。共依存的な関係。',
                'career': '無駄な努力や報われない状況。方向転換の必要性。',
                'spirituality': '精神的な停滞。古い信念体系への執着。',
            },
        },
    },
    {
        'id': 'death',
        'name': '死神',
        'number': 13,
        'arcana': 'major',
        'element': '水',
        'planet': '冥王星',
        'zodiac': '蠍座',
        'keywords': ['変容', '終わり', '再生', '解放'],
        'upright_meaning': '変容、終わりと始まり、解放、根本的な変化',
        'reversed_meaning': '変化への抵抗、停滞、恐れ、内なる浄化',
        'description': '黒い鎧を着た骸骨が白馬に乗り、黒い旗を掲げている。足元には倒れた王、立つ司教、祈る女性と子供。',
        'advice': '古いものを手放すことで、新しいものが生まれます。変化を恐れないでください。',
        'image_symbols': ['白い馬', '黒い旗', '白いバラ', '太陽', '双子の塔'],
        'meanings': {
            'upright': {
                'general': '古いものの終わりと新しい始まり。根本的な変容と再生の時。',
                'love': '関係の終わりまたは変容。より深いレベルでの再生。',
                'career': 'キャリアの大転換。古い仕事の終わりと新たな始まり。',
                'spirituality': 'エゴの死と魂の再生。深い変容のプロセス。',
            },
            'reversed': {
                'general': '変化への抵抗。必要な終わりを受け入れられない。',
                'love': '終わるべき関係への執着。変化を恐れる心。',
                'career': '必要な変化を避ける。古いやり方への固執。',
                'spirituality': '変容への恐れ。精神的成長の停滞。',
            },
        },
    },
    {
        'id': 'temperance',
        'name': '節制',
        'number': 14,
        'arcana': 'major',
        'element': '火',
        'zodiac': '射手座',
        'keywords': ['バランス', '調和', '忍耐', '統合'],
        'upright_meaning': '節度、バランス、忍耐、内なる平和',
        'reversed_meaning': '過剰、不均衡、忍耐の欠如、不調和',
        'description': '天使が二つのカップの間で水を注ぎ、片足を水に、もう片足を陸に置いている。',
        'advice': '極端を避け、中道を歩みましょう。対立するものを調和させる時です。',
        'image_symbols': ['天使', '二つのカップ', '三角形', 'アイリス', '山への道'],
        'meanings': {
            'upright': {
                'general': '対立する要素の調和的統合。中庸と節度による癒しと成長。',
                'love': 'バランスの取れた関係。相互理解と調和的な愛。',
                'career': '異なる要素の統合。チームワークとバランス感覚。',
                'spirituality': '高次と低次の統合。内なる錬金術のプロセス。',
            },
            'reversed': {
                'general': '不均衡や過剰。節度を失った状態。',
                'love': '関係の不調和。極端な感情や行動。',
                'career': 'バランスの欠如。仕事と私生活の不調和。',
                'spirituality': '精神的な不均衡。グラウンディングの必要性。',
            },
        },
    },
    {
        'id': 'devil',
        'name': '悪魔',
        'number': 15,
        'arcana': 'major',
        'element': '地',
        'planet': '土星',
        'zodiac': '山羊座',
        'keywords': ['束縛', '執着', '物質主義', '誘惑'],
        'upright_meaning': '束縛、執着、物質的な誘惑、依存',
        'reversed_meaning': '解放、束縛からの脱出、気づき、自由への一歩',
        'description': 'バフォメットが玉座に座り、鎖で繋がれた裸の男女が足元にいる。逆さの五芒星が頭上に。',
        'advice': 'あなたを縛っているものは幻想かもしれません。本当の自由は内側から始まります。',
        'image_symbols': ['バフォメット', '逆五芒星', '鎖', '松明', '裸の男女'],
        'meanings': {
            'upright': {
                'general': '物質的・精神的な束縛。執着と依存が自由を奪っている状態。',
                'love': '不健全な執着や依存関係。情欲に支配された関係。',
                'career': '金銭や地位への過度な執着。倫理を犠牲にした成功。',
                'spirituality': '物質世界への囚われ。低次の欲望との対峙。',
            },
            'reversed': {
                'general': '束縛からの解放。執着を手放し自由を取り戻す。',
                'love': '不健全な関係からの脱却。依存の克服。',
                'career': '物質主義からの解放。より高い価値の追求。',
                'spirituality': '影の統合。闇を認め光へ向かう。',
            },
        },
    },
    {
        'id': 'tower',
        'name': '塔',
        'number': 16,
        'arcana': 'major',
        'element': '火',
        'planet': '火星',
        'keywords': ['破壊', '突然の変化', '解放', '啓示'],
        'upright_meaning': '突然の変化、破壊、解放、真実の露呈',
        'reversed_meaning': '災害の回避、恐れ、変化への抵抗',
        'description': '雷に打たれて炎上する塔から、王冠が吹き飛ばされ、二人の人物が落下している。',
        'advice': '古い構造が崩れることで、新しい可能性が開けます。変化を受け入れましょう。',
        'image_symbols': ['塔', '稲妻', '炎', '落下する人物', '王冠'],
        'meanings': {
            'upright': {
                'general': '突然の崩壊と啓示。古い構造が壊れ真実が明らかになる。',
                'love': '関係の突然の終わりや真実の発覚。幻想の崩壊。',
                'career': '組織の崩壊や突然の失職。既存システムの破綻。',
                'spirituality': '悟りの雷。古い信念体系の崩壊と覚醒。',
            },
            'reversed': {
                'general': '崩壊への恐れ。必要な変化を避けることでより大きな危機を招く。',
                'love': '関係の危機を無視。問題の先送りによる悪化。',
                'career': '崩壊の予兆を無視。リスク管理の失敗。',
                'spirituality': '覚醒への抵抗。真実から目を背ける。',
            },
        },
    },
    {
        'id': 'star',
        'name': '星',
        'number': 17,
        'arcana': 'major',
        'element': '風',
        'planet': '天王星',
        'zodiac': '水瓶座',
        'keywords': ['希望', '癒し', 'インスピレーション', '精神性'],
        'upright_meaning': '希望、癒し、再生、精神的な導き',
        'reversed_meaning': '絶望、信仰の喪失、幻滅、ネガティブ思考',
        'description': '裸の女性が水辺で二つの水瓶から水を注いでいる。空には一つの大きな星と七つの小さな星。',
        'advice': '希望を持ち続けてください。宇宙はあなたを導いています。',
        'image_symbols': ['八芒星', '七つの星', '水瓶', '鳥', '水と大地'],
        'meanings': {
            'upright': {
                'general': '希望と癒しの時。高次の導きとインスピレーションを受ける。',
                'love': '理想的な愛の実現。魂レベルでの深い繋がり。',
                'career': '創造的なインスピレーション。理想を現実にする力。',
                'spirituality': '宇宙との繋がり。高次の目的の自覚。',
            },
            'reversed': {
                'general': '希望の喪失や幻滅。インスピレーションの枯渇。',
                'love': '理想と現実のギャップ。期待の裏切り。',
                'career': '創造性の停滞。方向性を見失っている状態。',
                'spirituality': '信仰の危機。宇宙との繋がりを感じられない。',
            },
        },
    },
    {
        'id': 'moon',
        'name': '月',
        'number': 18,
        'arcana': 'major',
        'element': '水',
        'planet': '月',
        'zodiac': '魚座',
        'keywords': ['幻想', '不安', '直感', '潜在意識'],
        'upright_meaning': '幻想、不安、直感、隠された真実',
        'reversed_meaning': '幻想からの解放、明晰さ、恐れの克服',
        'description': '満月の下、犬と狼が吠え、ザリガニが池から這い出る。遠くには二つの塔。',
        'advice': '全てが見えている訳ではありません。直感を信じつつ、冷静さを保ってください。',
        'image_symbols': ['満月', '犬と狼', 'ザリガニ', '二つの塔', '曲がりくねった道'],
        'meanings': {
            'upright': {
                'general': '幻想と現実の境界。潜在意識からのメッセージと向き合う時。',
                'love': '感情の混乱や不安。隠された真実がある可能性。',
                'career': '不確実性と混乱。明確でない状況での判断。',
                'spirituality': '魂の暗夜。深い内面の探求と変容。',
            },
            'reversed': {
                'general': '幻想からの覚醒。真実が明らかになり混乱が晴れる。',
                'love': '誤解の解消。隠されていた真実の発覚。',
                'career': '混乱の終息。明確な方向性の確立。',
                'spirituality': '闇から光へ。潜在意識の統合。',
            },
        },
    },
    {
        'id': 'sun',
        'name': '太陽',
        'number': 19,
        'arcana': 'major',
        'element': '火',
        'planet': '太陽',
        'keywords': ['成功', '喜び', '活力', '明晰さ'],
        'upright_meaning': '成功、幸福、活力、明るい未来',
        'reversed_meaning': '過度の楽観、見栄、一時的な後退',
        'description': '大きな太陽の下、裸の子供が白馬に乗っている。背景にはひまわりと壁。',
        'advice': '人生を楽しみ、あなたの光を世界と分かち合いましょう。',
        'image_symbols': ['太陽', '子供', '白馬', 'ひまわり', '赤い旗'],
        'meanings': {
            'upright': {
                'general': '成功と喜びの絶頂期。すべてが明るく照らされ活力に満ちる。',
                'love': '幸福な関係。愛の喜びと情熱に満ちた時期。',
                'career': '大きな成功と認知。目標達成と栄光の時。',
                'spirituality': '悟りと啓発。内なる光の完全な顕現。',
            },
            'reversed': {
                'general': '一時的な曇り。過度の楽観主義や現実逃避。',
                'love': 'エゴの衝突。過度の自己中心性による問題。',
                'career': '成功への過信。傲慢さによる失敗の危険。',
                'spirituality': '精神的な傲慢。謙虚さの必要性。',
            },
        },
    },
    {
        'id': 'judgement',
        'name': '審判',
        'number': 20,
        'arcana': 'major',
        'element': '火',
        'planet': '冥王星',
        'keywords': ['復活', '覚醒', '判断', '許し'],
        'upright_meaning': '精神的覚醒、判断、許し、再生',
        'reversed_meaning': '自己批判、過去への執着、許しの欠如',
        'description': '天使がラッパを吹き、墓から人々が蘇っている。山々に囲まれた情景。',
        'advice': '過去を許し、新しい自分として生まれ変わる時が来ました。',
        'image_symbols': ['大天使ガブリエル', 'ラッパ', '赤十字の旗', '蘇る人々', '山'],
        'meanings': {
            'upright': {
                'general': '最終的な判断と復活。過去を清算し新たな人生へ生まれ変わる。',
                'love': '関係の再生や復活。過去の清算と新たな始まり。',
                'career': '天職への目覚め。真の使命の自覚と実行。',
                'spirituality': '魂の覚醒。高次の召命に応える時。',
            },
            'reversed': {
                'general': '判断の回避や自己批判。過去から学べていない状態。',
                'love': '過去の繰り返し。許しの欠如による停滞。',
                'career': '使命からの逃避。天職を見つけられない苦悩。',
                'spirituality': '覚醒への抵抗。内なる声を無視している。',
            },
        },
    },
    {
        'id': 'world',
        'name': '世界',
        'number': 21,
        'arcana': 'major',
        'element': '地',
        'planet': '土星',
        'keywords': ['完成', '達成', '統合', '新たな始まり'],
        'upright_meaning': '完成、成就、全体性、新しいサイクル',
        'reversed_meaning': '未完成、遅延、外的な成功の追求',
        'description': '月桂樹の輪の中で、裸の女性が踊っている。四隅には四元素を表す生き物。',
        'advice': '一つのサイクルが完成しました。祝福し、次の冒険に備えましょう。',
        'image_symbols': ['月桂樹の輪', '踊る女性', '四つの生き物', 'ワンド', '紫の布'],
        'meanings': {
            'upright': {
                'general': 'サイクルの完成と統合。すべてが一つになり新たな次元へ。',
                'love': '完全な結合と成就。魂の伴侶との出会いと統合。',
                'career': '大きなプロジェクトの完成。世界規模での成功。',
                'spirituality': '悟りの完成。個と宇宙の完全な統合。',
            },
            'reversed': {
                'general': '未完成や停滞。最後の一歩を踏み出せない状態。',
                'love': '関係の未完成。完全な結合への恐れ。',
                'career': 'プロジェクトの未完。最終段階での躓き。',
                'spirituality': '統合の未完。最後の課題が残っている。',
            },
        },
    },
]

# 小アルカナ（ワンド・カップ・ソード・ペンタクル 各14枚）
MINOR_ARCANA = [
    {
        'id': 'ace-of-wands',
        'name': 'ワンドのエース',
        'number': 1,
        'arcana': 'minor',
        'suit': 'wands',
        'element': '火',
        'keywords': ['新しい始まり', '創造力', '成長', 'インスピレーション'],
        'upright_meaning': '新しいプロジェクト、創造的なエネルギー、成長の可能性',
        'reversed_meaning': '創造性の阻害、遅延、偽りのスタート',
        'description': '雲から伸びる手が、葉が芽吹いたワンドを握っている。',
        'advice': '新しいアイデアを行動に移す絶好の機会です。',
    },
    {
        'id': 'two-of-wands',
        'name': 'ワンドの2',
        'number': 2,
        'arcana': 'minor',
        'suit': 'wands',
        'element': '火',
        'keywords': ['計画', '進歩', '決断', '可能性'],
        'upright_meaning': '長期計画、進歩、発見、パートナーシップ',
        'reversed_meaning': '計画の欠如、恐れ、優柔不断',
        'description': '城壁に立つ人物が地球儀を持ち、遠くを見つめている。',
        'advice': '大きな視野で未来を計画しましょう。',
    },
    {
        'id': 'three-of-wands',
        'name': 'ワンドの3',
        'number': 3,
        'arcana': 'minor',
        'suit': 'wands',
        'element': '火',
        'keywords': ['拡大', '先見性', '機会', '冒険'],
        'upright_meaning': '拡大、成長、機会、長期的な成功',
        'reversed_meaning': '計画の遅延、挫折、視野の狭さ',
        'description': '崖の上に立つ人物が、海を行く船を見守っている。',
        'advice': '種を蒔いた努力が実を結び始めています。',
    },
    {
        'id': 'four-of-wands',
        'name': 'ワンドの4',
        'number': 4,
        'arcana': 'minor',
        'suit': 'wands',
        'element': '火',
        'keywords': ['祝福', '調和', '達成', '安定'],
        'upright_meaning': '祝福、喜び、安定、達成',
        'reversed_meaning': '不安定、移行期、未完成の祝福',
        'description': '花で飾られた4本のワンドの下で人々が祝っている。',
        'advice': '達成を祝い、喜びを分かち合いましょう。',
    },
    {
        'id': 'five-of-wands',
        'name': 'ワンドの5',
        'number': 5,
        'arcana': 'minor',
        'suit': 'wands',
        'element': '火',
        'keywords': ['競争', '対立', '挑戦', '多様性'],
        'upright_meaning': '競争、対立、挑戦、意見の相違',
        'reversed_meaning': '対立の回避、内なる葛藤、妥協',
        'description': '5人の若者がワンドを持って争っている。',
        'advice': '健全な競争は成長をもたらします。',
    },
    {
        'id': 'six-of-wands',
        'name': 'ワンドの6',
        'number': 6,
        'arcana': 'minor',
        'suit': 'wands',
        'element': '火',
        'keywords': ['勝利', '認識', 'リーダーシップ', '成功'],
        'upright_meaning': '勝利、公的な認識、自信、リーダーシップ',
        'reversed_meaning': '私的な達成、自己疑念、傲慢',
        'description': '月桂冠を被った騎手が、群衆の歓呼を受けている。',
        'advice': '成功を謙虚に受け止め、他者と分かち合いましょう。',
    },
    {
        'id': 'seven-of-wands',
        'name': 'ワンドの7',
        'number': 7,
        'arcana': 'minor',
        'suit': 'wands',
        'element': '火',
        'keywords': ['防衛', '挑戦', '競争', '忍耐'],
        'upright_meaning': '防衛、挑戦への対処、競争、持続',
        'reversed_meaning': '圧倒される、諦め、立場の喪失',
        'description': '高台に立つ人物が、下から迫るワンドを防いでいる。',
        'advice': '自分の立場を守り抜く勇気を持ちましょう。',
    },
    {
        'id': 'eight-of-wands',
        'name': 'ワンドの8',
        'number': 8,
        'arcana': 'minor',
        'suit': 'wands',
        'element': '火',
        'keywords': ['迅速', '動き', '急速な進展', '旅行'],
        'upright_meaning': '迅速な行動、急速な進展、旅行、動き',
        'reversed_meaning': '遅延、挫折、内なる動揺',
        'description': '8本のワンドが空を飛んでいる。',
        'advice': '物事が急速に動いています。流れに乗りましょう。',
    },
    {
        'id': 'nine-of-wands',
        'name': 'ワンドの9',
        'number': 9,
        'arcana': 'minor',
        'suit': 'wands',
        'element': '火',
        'keywords': ['忍耐', '勇気', '持続', '最後の試練'],
        'upright_meaning': '忍耐、最後の挑戦、勇気、境界線',
        'reversed_meaning': '妄想、頑固、降伏の必要性',
        'description': '傷ついた戦士が、ワンドに寄りかかって立っている。',
        'advice': 'もう少しで目標に到達します。最後まで諦めないで。',
    },
    {
        'id': 'ten-of-wands',
        'name': 'ワンドの10',
        'number': 10,
        'arcana': 'minor',
        'suit': 'wands',
        'element': '火',
        'keywords': ['重荷', '責任', '努力', '達成への圧力'],
        'upright_meaning': '重い責任、重荷、努力、達成への圧力',
        'reversed_meaning': '責任の委譲、重荷からの解放',
        'description': '人物が10本のワンドを抱えて歩いている。',
        'advice': '全てを一人で背負う必要はありません。助けを求めましょう。',
    },
    {
        'id': 'page-of-wands',
        'name': 'ワンドのペイジ',
        'number': 11,
        'arcana': 'minor',
        'suit': 'wands',
        'element': '火',
        'keywords': ['探求', '興奮', '自由な精神', '新しいアイデア'],
        'upright_meaning': '新しいアイデア、熱意、探求心、メッセージ',
        'reversed_meaning': '悪いニュース、未熟さ、無責任',
        'description': '若者がワンドを掲げ、遠くを見つめている。',
        'advice': '子供のような好奇心を持って新しいことに挑戦しましょう。',
    },
    {
        'id': 'knight-of-wands',
        'name': 'ワンドのナイト',
        'number': 12,
        'arcana': 'minor',
        'suit': 'wands',
        'element': '火',
        'keywords': ['冒険', '情熱', '衝動', '行動'],
        'upright_meaning': '冒険、エネルギー、情熱、衝動的な行動',
        'reversed_meaning': '怒り、衝動性、無謀さ、遅延',
        'description': '炎のような馬に乗った騎士が前進している。',
        'advice': '情熱を持って行動しつつ、計画性も忘れずに。',
    },
    {
        'id': 'queen-of-wands',
        'name': 'ワンドのクイーン',
        'number': 13,
        'arcana': 'minor',
        'suit': 'wands',
        'element': '火',
        'keywords': ['自信', 'カリスマ', '決意', '創造性'],
        'upright_meaning': '自信、独立、カリスマ、社交性',
        'reversed_meaning': '嫉妬、不安、自己中心的',
        'description': '黒猫を従えた女王が、ひまわりで飾られた王座に座る。',
        'advice': '自信を持って、あなたの光を輝かせましょう。',
    },
    {
        'id': 'king-of-wands',
        'name': 'ワンドのキング',
        'number': 14,
        'arcana': 'minor',
        'suit': 'wands',
        'element': '火',
        'keywords': ['リーダーシップ', 'ビジョン', '起業家精神', '名誉'],
        'upright_meaning': '自然なリーダー、ビジョン、起業家精神',
        'reversed_meaning': '傲慢、衝動的、高圧的',
        'description': 'ライオンとサラマンダーで飾られた王座に座る王。',
        'advice': 'ビジョンを持ってリードし、他者を鼓舞しましょう。',
    },
    {
        'id': 'ace-of-cups',
        'name': 'カップのエース',
        'number': 1,
        'arcana': 'minor',
        'suit': 'cups',
        'element': '水',
        'keywords': ['新しい愛', '感情', '直感', '精神性'],
        'upright_meaning': '新しい愛、感情の始まり、創造性、精神的覚醒',
        'reversed_meaning': '感情の抑圧、空虚感、創造性の阻害',
        'description': '雲から伸びる手が、溢れる水のカップを差し出している。',
        'advice': '心を開いて、愛と喜びを受け入れましょう。',
    },
    {
        'id': 'two-of-cups',
        'name': 'カップの2',
        'number': 2,
        'arcana': 'minor',
        'suit': 'cups',
        'element': '水',
        'keywords': ['パートナーシップ', '調和', '相互理解', '愛'],
        'upright_meaning': 'パートナーシップ、相互理解、調和、愛の結合',
        'reversed_meaning': '不調和、分離、コミュニケーション不足',
        'description': '二人の人物がカップを交わし、上にはカドゥケウスが浮かぶ。',
        'advice': '心を開いて相手と向き合い、深い絆を築きましょう。',
    },
    {
        'id': 'three-of-cups',
        'name': 'カップの3',
        'number': 3,
        'arcana': 'minor',
        'suit': 'cups',
        'element': '水',
        'keywords': ['祝福', '友情', 'コミュニティ', '創造性'],
        'upright_meaning': '祝福、友情、創造的な協力、コミュニティ',
        'reversed_meaning': '過剰な快楽、ゴシップ、孤立',
        'description': '三人の女性がカップを掲げて祝っている。',
        'advice': '友人と喜びを分かち合い、豊かな関係を築きましょう。',
    },
    {
        'id': 'four-of-cups',
        'name': 'カップの4',
        'number': 4,
        'arcana': 'minor',
        'suit': 'cups',
        'element': '水',
        'keywords': ['内省', '再評価', '無関心', '機会'],
        'upright_meaning': '内省、瞑想、再評価、新しい機会への気づき',
        'reversed_meaning': '新しい可能性、動機づけ、機会の受容',
        'description': '木の下に座る人物に、雲から新しいカップが差し出されている。',
        'advice': '内なる声に耳を傾け、新しい可能性に気づきましょう。',
    },
    {
        'id': 'five-of-cups',
        'name': 'カップの5',
        'number': 5,
        'arcana': 'minor',
        'suit': 'cups',
        'element': '水',
        'keywords': ['悲しみ', '喪失', '後悔', '失望'],
        'upright_meaning': '悲しみ、喪失、後悔、失望',
        'reversed_meaning': '受容、前進、許し、新しい始まり',
        'description': '黒いマントの人物が、倒れた3つのカップを見つめている。',
        'advice': '失ったものを悼みつつ、残されたものに感謝しましょう。',
    },
    {
        'id': 'six-of-cups',
        'name': 'カップの6',
        'number': 6,
        'arcana': 'minor',
        'suit': 'cups',
        'element': '水',
        'keywords': ['懐かしさ', '子供時代', '無邪気', '喜び'],
        'upright_meaning': '懐かしさ、子供時代の思い出、無邪気さ、過去からの贈り物',
        'reversed_meaning': '過去への執着、成長、未来への移行',
        'description': '子供が別の子供に花の入ったカップを渡している。',
        'advice': '過去の美しい思い出を大切にしつつ、現在を生きましょう。',
    },
    {
        'id': 'seven-of-cups',
        'name': 'カップの7',
        'number': 7,
        'arcana': 'minor',
        'suit': 'cups',
        'element': '水',
        'keywords': ['選択', '幻想', '空想', '可能性'],
        'upright_meaning': '選択肢、幻想、想像力、可能性',
        'reversed_meaning': '明確さ、決断、現実への回帰',
        'description': '雲の中に浮かぶ7つのカップ、それぞれに異なるシンボル。',
        'advice': '多くの選択肢から、現実的で心に響くものを選びましょう。',
    },
    {
        'id': 'eight-of-cups',
        'name': 'カップの8',
        'number': 8,
        'arcana': 'minor',
        'suit': 'cups',
        'element': '水',
        'keywords': ['離脱', '探求', '手放す', '精神的成長'],
        'upright_meaning': '離脱、より深い意味の探求、物質的なものを手放す',
        'reversed_meaning': '躊躇、恐れ、偽りの満足',
        'description': '人物が8つのカップを残して山へ向かって歩いている。',
        'advice': 'より深い充足を求めて、慣れ親しんだものを手放す勇気を。',
    },
    {
        'id': 'nine-of-cups',
        'name': 'カップの9',
        'number': 9,
        'arcana': 'minor',
        'suit': 'cups',
        'element': '水',
        'keywords': ['満足', '願望成就', '感情的充足', '幸福'],
        'upright_meaning': '願望の成就、満足、感情的な充足、幸福',
        'reversed_meaning': '物質主義、不満足、内なる幸福の欠如',
        'description': '満足そうな人物が、アーチ状に並んだ9つのカップの前に座っている。',
        'advice': 'あなたの願いは叶いつつあります。感謝の心を忘れずに。',
    },
    {
        'id': 'ten-of-cups',
        'name': 'カップの10',
        'number': 10,
        'arcana': 'minor',
        'suit': 'cups',
        'element': '水',
        'keywords': ['幸福', '調和', '家族', '感情的成就'],
        'upright_meaning': '幸福、調和、家族の幸せ、感情的な成就',
        'reversed_meaning': '価値観の相違、偽りの幸福、関係の問題',
        'description': '虹の下で家族が喜び、10個のカップがアーチを描く。',
        'advice': '真の幸福は愛する人々との絆の中にあります。',
    },
    {
        'id': 'page-of-cups',
        'name': 'カップのペイジ',
        'number': 11,
        'arcana': 'minor',
        'suit': 'cups',
        'element': '水',
        'keywords': ['感受性', '直感', '創造的な知らせ', '好奇心'],
        'upright_meaning': '感情的なメッセージ、直感のひらめき、創造的な始まり',
        'reversed_meaning': '感情の未熟さ、現実逃避、気まぐれ',
        'description': 'カップから顔を出す魚を見つめる若者。',
        'advice': '心に浮かぶ小さなひらめきを大切にしましょう。',
    },
    {
        'id': 'knight-of-cups',
        'name': 'カップのナイト',
        'number': 12,
        'arcana': 'minor',
        'suit': 'cups',
        'element': '水',
        'keywords': ['ロマンス', '招待', '理想', '魅力'],
        'upright_meaning': 'ロマンチックな申し出、理想の追求、優雅な行動',
        'reversed_meaning': '非現実的な期待、気分屋、誘惑',
        'description': '白馬に乗りカップを差し出す騎士が川へ向かう。',
        'advice': '理想を胸に抱きつつ、足元の現実も見つめましょう。',
    },
    {
        'id': 'queen-of-cups',
        'name': 'カップのクイーン',
        'number': 13,
        'arcana': 'minor',
        'suit': 'cups',
        'element': '水',
        'keywords': ['共感', '慈愛', '直感', '癒し'],
        'upright_meaning': '深い共感、思いやり、直感的な理解',
        'reversed_meaning': '感情への依存、境界線の喪失、自己犠牲',
        'description': '海辺の王座で装飾されたカップを見つめる女王。',
        'advice': '他者を思いやるのと同じだけ、自分の心も労わりましょう。',
    },
    {
        'id': 'king-of-cups',
        'name': 'カップのキング',
        'number': 14,
        'arcana': 'minor',
        'suit': 'cups',
        'element': '水',
        'keywords': ['感情の成熟', '寛容', '外交', '安定'],
        'upright_meaning': '感情のバランス、寛大さ、穏やかな指導力',
        'reversed_meaning': '感情の抑圧、操作的な態度、気分の揺れ',
        'description': '荒れる海の上で王座に座り、静かにカップを持つ王。',
        'advice': '感情の波に呑まれず、穏やかな心で判断しましょう。',
    },
    {
        'id': 'ace-of-swords',
        'name': 'ソードのエース',
        'number': 1,
        'arcana': 'minor',
        'suit': 'swords',
        'element': '風',
        'keywords': ['真実', '明晰さ', '突破', '新しいアイデア'],
        'upright_meaning': '精神的な明晰さ、真実、突破、新しいアイデア',
        'reversed_meaning': '混乱、誤解、精神的な霧',
        'description': '雲から伸びる手が、王冠を貫く剣を握っている。',
        'advice': '真実を追求し、明晰な思考で問題を切り開きましょう。',
    },
    {
        'id': 'two-of-swords',
        'name': 'ソードの2',
        'number': 2,
        'arcana': 'minor',
        'suit': 'swords',
        'element': '風',
        'keywords': ['困難な決定', 'ジレンマ', 'バランス', '停滞'],
        'upright_meaning': '困難な決定、ジレンマ、バランス、内なる対立',
        'reversed_meaning': '優柔不断、情報不足、決断の必要性',
        'description': '目隠しをした女性が、交差した二本の剣を持っている。',
        'advice': '心を静めて、内なる声に耳を傾けましょう。',
    },
    {
        'id': 'three-of-swords',
        'name': 'ソードの3',
        'number': 3,
        'arcana': 'minor',
        'suit': 'swords',
        'element': '風',
        'keywords': ['悲しみ', '痛み', '裏切り', '喪失'],
        'upright_meaning': '心の痛み、悲しみ、裏切り、分離',
        'reversed_meaning': '回復、許し、痛みからの解放',
        'description': '三本の剣が赤いハートを貫いている。背景は雨。',
        'advice': '痛みを認め、癒しのプロセスを始めましょう。',
    },
    {
        'id': 'four-of-swords',
        'name': 'ソードの4',
        'number': 4,
        'arcana': 'minor',
        'suit': 'swords',
        'element': '風',
        'keywords': ['休息', '回復', '内省', '準備'],
        'upright_meaning': '休息、回復、瞑想、準備期間',
        'reversed_meaning': '落ち着きのなさ、燃え尽き、活動への復帰',
        'description': '教会内で横たわる騎士の像、上に三本の剣。',
        'advice': '休息を取り、内なる平和を取り戻しましょう。',
    },
    {
        'id': 'five-of-swords',
        'name': 'ソードの5',
        'number': 5,
        'arcana': 'minor',
        'suit': 'swords',
        'element': '風',
        'keywords': ['対立', '敗北', '屈辱', '勝利の代償'],
        'upright_meaning': '対立、不名誉な勝利、敗北、裏切り',
        'reversed_meaning': '和解、過去を手放す、許し',
        'description': '勝者が剣を集め、敗者が去っていく場面。',
        'advice': '勝利の代償を考え、時には引くことも大切です。',
    },
    {
        'id': 'six-of-swords',
        'name': 'ソードの6',
        'number': 6,
        'arcana': 'minor',
        'suit': 'swords',
        'element': '風',
        'keywords': ['移行', '変化', '旅', '前進'],
        'upright_meaning': '移行、困難からの脱出、旅、前進',
        'reversed_meaning': '抵抗、望まない変化、停滞',
        'description': 'ボートに乗る親子、船頭が静かな水を渡る。',
        'advice': '困難を後にし、より良い場所へ向かいましょう。',
    },
    {
        'id': 'seven-of-swords',
        'name': 'ソードの7',
        'number': 7,
        'arcana': 'minor',
        'suit': 'swords',
        'element': '風',
        'keywords': ['策略', '欺瞞', '逃避', '機転'],
        'upright_meaning': '策略、欺瞞、秘密の行動、機転',
        'reversed_meaning': '告白、後悔、計画の失敗',
        'description': '男が5本の剣を持って忍び足でキャンプから去る。',
        'advice': '正直さが最良の方策かもしれません。',
    },
    {
        'id': 'eight-of-swords',
        'name': 'ソードの8',
        'number': 8,
        'arcana': 'minor',
        'suit': 'swords',
        'element': '風',
        'keywords': ['制限', '束縛', '無力感', '自己制限'],
        'upright_meaning': '制限、束縛、無力感、自己制限的な思考',
        'reversed_meaning': '解放、新しい視点、自由への一歩',
        'description': '目隠しされ縛られた女性、周りを8本の剣が囲む。',
        'advice': '制限は心の中にあるかもしれません。視点を変えましょう。',
    },
    {
        'id': 'nine-of-swords',
        'name': 'ソードの9',
        'number': 9,
        'arcana': 'minor',
        'suit': 'swords',
        'element': '風',
        'keywords': ['不安', '悪夢', '罪悪感', '心配'],
        'upright_meaning': '不安、悪夢、過度の心配、罪悪感',
        'reversed_meaning': '希望、不安からの解放、癒し',
        'description': 'ベッドで頭を抱える人物、壁に9本の剣。',
        'advice': '不安は現実より大きく見えるもの。助けを求めましょう。',
    },
    {
        'id': 'ten-of-swords',
        'name': 'ソードの10',
        'number': 10,
        'arcana': 'minor',
        'suit': 'swords',
        'element': '風',
        'keywords': ['終焉', '裏切り', '崩壊', '再生への準備'],
        'upright_meaning': '痛ましい終わり、裏切り、崩壊、底',
        'reversed_meaning': '回復、再生、最悪期の終わり',
        'description': '10本の剣が背中に刺さった人物が倒れている。',
        'advice': '最悪の時期は過ぎました。再生の時が来ています。',
    },
    {
        'id': 'page-of-swords',
        'name': 'ソードのペイジ',
        'number': 11,
        'arcana': 'minor',
        'suit': 'swords',
        'element': '風',
        'keywords': ['好奇心', '警戒', '新しい考え', '情報'],
        'upright_meaning': '知的好奇心、情報収集、鋭い観察',
        'reversed_meaning': '噂話、軽率な発言、準備不足',
        'description': '風の吹く丘で剣を構え、周囲を見渡す若者。',
        'advice': '情報を集め、事実を確かめてから動きましょう。',
    },
    {
        'id': 'knight-of-swords',
        'name': 'ソードのナイト',
        'number': 12,
        'arcana': 'minor',
        'suit': 'swords',
        'element': '風',
        'keywords': ['迅速', '野心', '決断', '突進'],
        'upright_meaning': '素早い行動、強い意志、目標への突進',
        'reversed_meaning': '性急さ、無計画、攻撃的な態度',
        'description': '嵐の中、剣を振りかざして疾走する騎士。',
        'advice': '勢いを活かしつつ、周囲への配慮を忘れずに。',
    },
    {
        'id': 'queen-of-swords',
        'name': 'ソードのクイーン',
        'number': 13,
        'arcana': 'minor',
        'suit': 'swords',
        'element': '風',
        'keywords': ['明晰', '独立', '率直', '洞察'],
        'upright_meaning': '明晰な判断、率直な言葉、経験に基づく知恵',
        'reversed_meaning': '冷淡さ、辛辣さ、孤立',
        'description': '雲の上の王座で剣を真っ直ぐに掲げる女王。',
        'advice': '真実を率直に、しかし思いやりを込めて伝えましょう。',
    },
    {
        'id': 'king-of-swords',
        'name': 'ソードのキング',
        'number': 14,
        'arcana': 'minor',
        'suit': 'swords',
        'element': '風',
        'keywords': ['権威', '論理', '公正', '知性'],
        'upright_meaning': '知的な権威、公正な判断、論理的思考',
        'reversed_meaning': '権力の乱用、冷酷さ、独断',
        'description': '蝶の彫られた王座で剣を持ち、正面を見据える王。',
        'advice': '感情に流されず、公平な視点で決断しましょう。',
    },
    {
        'id': 'ace-of-pentacles',
        'name': 'ペンタクルのエース',
        'number': 1,
        'arcana': 'minor',
        'suit': 'pentacles',
        'element': '地',
        'keywords': ['新しい機会', '繁栄', '物質的成功', '顕現'],
        'upright_meaning': '新しい金銭的機会、繁栄、物質的成功、顕現',
        'reversed_meaning': '機会の喪失、金銭的な計画の失敗',
        'description': '雲から伸びる手が、金のペンタクルを差し出している。',
        'advice': '新しい物質的な機会を掴み、地に足をつけて進みましょう。',
    },
    {
        'id': 'two-of-pentacles',
        'name': 'ペンタクルの2',
        'number': 2,
        'arcana': 'minor',
        'suit': 'pentacles',
        'element': '地',
        'keywords': ['バランス', '適応', '時間管理', '優先順位'],
        'upright_meaning': 'バランス、適応性、時間管理、複数の責任',
        'reversed_meaning': '圧倒される、バランスの喪失、組織化の必要',
        'description': '人物が無限大記号で結ばれた2つのペンタクルを操っている。',
        'advice': '複数の責任をうまくバランスを取って管理しましょう。',
    },
    {
        'id': 'three-of-pentacles',
        'name': 'ペンタクルの3',
        'number': 3,
        'arcana': 'minor',
        'suit': 'pentacles',
        'element': '地',
        'keywords': ['チームワーク', 'コラボレーション', 'スキル', '計画'],
        'upright_meaning': 'チームワーク、コラボレーション、スキルの向上、計画',
        'reversed_meaning': '協力の欠如、品質の低下、調和の欠如',
        'description': '職人が大聖堂で作業し、他の人々が計画を確認している。',
        'advice': '他者と協力し、各自の才能を活かしましょう。',
    },
    {
        'id': 'four-of-pentacles',
        'name': 'ペンタクルの4',
        'number': 4,
        'arcana': 'minor',
        'suit': 'pentacles',
        'element': '地',
        'keywords': ['保守', '統制', '安定', '所有欲'],
        'upright_meaning': '保守、統制、安定、物質的な安全',
        'reversed_meaning': 'けち、物質主義、閉鎖的',
        'description': '人物が4つのペンタクルをしっかりと抱えている。',
        'advice': '安全を求めつつも、過度の執着は避けましょう。',
    },
    {
        'id': 'five-of-pentacles',
        'name': 'ペンタクルの5',
        'number': 5,
        'arcana': 'minor',
        'suit': 'pentacles',
        'element': '地',
        'keywords': ['困窮', '不安', '孤立', '物質的損失'],
        'upright_meaning': '金銭的損失、貧困、孤立、不安',
        'reversed_meaning': '回復、精神的な豊かさ、困難の克服',
        'description': '雪の中、二人の貧しい人が教会の窓の前を通り過ぎる。',
        'advice': '困難な時期でも、助けは近くにあるかもしれません。',
    },
    {
        'id': 'six-of-pentacles',
        'name': 'ペンタクルの6',
        'number': 6,
        'arcana': 'minor',
        'suit': 'pentacles',
        'element': '地',
        'keywords': ['寛大さ', '慈善', '公正', '分かち合い'],
        'upright_meaning': '寛大さ、慈善、公正な分配、分かち合い',
        'reversed_meaning': '利己主義、借金、不公正',
        'description': '裕福な商人が貧しい人々に施しをしている。',
        'advice': '与えることと受け取ることのバランスを保ちましょう。',
    },
    {
        'id': 'seven-of-pentacles',
        'name': 'ペンタクルの7',
        'number': 7,
        'arcana': 'minor',
        'suit': 'pentacles',
        'element': '地',
        'keywords': ['忍耐', '投資', '長期的視野', '成長'],
        'upright_meaning': '忍耐、投資の成果、長期的な視野、持続的な成長',
        'reversed_meaning': '不安、焦り、報われない努力',
        'description': '農夫が成長した植物とペンタクルを見つめている。',
        'advice': '忍耐強く努力を続ければ、やがて実を結びます。',
    },
    {
        'id': 'eight-of-pentacles',
        'name': 'ペンタクルの8',
        'number': 8,
        'arcana': 'minor',
        'suit': 'pentacles',
        'element': '地',
        'keywords': ['熟練', '献身', '品質', '職人気質'],
        'upright_meaning': '熟練、献身、品質へのこだわり、スキルの向上',
        'reversed_meaning': '完璧主義、野心の欠如、品質の低下',
        'description': '職人が一心にペンタクルを彫っている。',
        'advice': '技術を磨き、細部にこだわることで成功へ近づきます。',
    },
    {
        'id': 'nine-of-pentacles',
        'name': 'ペンタクルの9',
        'number': 9,
        'arcana': 'minor',
        'suit': 'pentacles',
        'element': '地',
        'keywords': ['豊かさ', '自立', '贅沢', '達成'],
        'upright_meaning': '豊かさ、自立、贅沢、個人的な達成',
        'reversed_meaning': '過労、ステータスへの執着、孤独',
        'description': '豊かな庭園で、優雅な女性が鷹と共にいる。',
        'advice': '努力の成果を楽しみ、達成を祝いましょう。',
    },
    {
        'id': 'ten-of-pentacles',
        'name': 'ペンタクルの10',
        'number': 10,
        'arcana': 'minor',
        'suit': 'pentacles',
        'element': '地',
        'keywords': ['遺産', '家族の富', '伝統', '長期的成功'],
        'upright_meaning': '遺産、家族の富、伝統、長期的な成功',
        'reversed_meaning': '家族の対立、財産問題、伝統への反発',
        'description': '三世代の家族が、ペンタクルで飾られたアーチの下にいる。',
        'advice': '世代を超えて受け継がれる価値あるものを築きましょう。',
    },
    {
        'id': 'page-of-pentacles',
        'name': 'ペンタクルのペイジ',
        'number': 11,
        'arcana': 'minor',
        'suit': 'pentacles',
        'element': '地',
        'keywords': ['学び', '計画', '勤勉', '機会'],
        'upright_meaning': '学びの始まり、堅実な計画、新しい機会',
        'reversed_meaning': '怠惰、非現実的な計画、集中力の欠如',
        'description': '緑の野原でペンタクルを大切に掲げる若者。',
        'advice': '小さな一歩を積み重ね、着実に学びを深めましょう。',
    },
    {
        'id': 'knight-of-pentacles',
        'name': 'ペンタクルのナイト',
        'number': 12,
        'arcana': 'minor',
        'suit': 'pentacles',
        'element': '地',
        'keywords': ['忍耐', '責任', '堅実', '継続'],
        'upright_meaning': '着実な努力、責任感、忍耐強い前進',
        'reversed_meaning': '停滞、頑固、退屈',
        'description': '静かに佇む黒馬に乗り、ペンタクルを見つめる騎士。',
        'advice': '焦らずに、決めたことを一つずつやり遂げましょう。',
    },
    {
        'id': 'queen-of-pentacles',
        'name': 'ペンタクルのクイーン',
        'number': 13,
        'arcana': 'minor',
        'suit': 'pentacles',
        'element': '地',
        'keywords': ['豊かさ', '養育', '実用性', '安心'],
        'upright_meaning': '実際的な豊かさ、面倒見の良さ、安定した暮らし',
        'reversed_meaning': '物質への執着、過干渉、自己管理の欠如',
        'description': '花と果実に囲まれた庭で、ペンタクルを膝に抱く女王。',
        'advice': '身近な暮らしを整えることが、豊かさへの近道です。',
    },
    {
        'id': 'king-of-pentacles',
        'name': 'ペンタクルのキング',
        'number': 14,
        'arcana': 'minor',
        'suit': 'pentacles',
        'element': '地',
        'keywords': ['繁栄', '成功', '安定', '事業'],
        'upright_meaning': '物質的な成功、安定した基盤、寛大な支援者',
        'reversed_meaning': '貪欲、浪費、物質主義',
        'description': 'ぶどうの装飾に囲まれた王座で、ペンタクルを手にする王。',
        'advice': '築いた豊かさを、周囲と分かち合いましょう。',
    },
]

ALL_TAROT_CARDS = MAJOR_ARCANA + MINOR_ARCANA

_CARDS_BY_ID = {card['id']: card for card in ALL_TAROT_CARDS}

# カードごとの詳細メッセージ（用意のあるカードのみ）
TAROT_MESSAGES = {
    'fool': {
        'upright_interpretations': ['新しい冒険が始まる予感。純粋な心で一歩を踏み出す時が来ました', '既成概念にとらわれない自由な発想が、思わぬ幸運を引き寄せるでしょう'],
        'reversed_interpretations': ['慎重さが必要な時期。無謀な行動は避け、よく考えてから動きましょう', '現実を見つめ直し、地に足をつけた行動を心がけることが大切です'],
        'position_interpretations': {
            'past': ['過去の無邪気さや純粋さが、今のあなたの土台となっています'],
            'present': ['今まさに新しいスタートラインに立っています'],
            'future': ['新たな冒険があなたを待っています'],
            'advice': ['心の声に従って、勇気を持って一歩踏み出してください'],
            'obstacle': ['恐れや不安が新しい挑戦を妨げています'],
            'outcome': ['純粋な気持ちで始めた冒険が、素晴らしい結果をもたらします'],
            'inner_self': ['内なる子どものような好奇心が蘇っています'],
            'environment': ['周囲が新しい始まりを後押ししています'],
            'hopes': ['自由で制約のない人生を望んでいます'],
            'fears': ['失敗や批判を恐れています'],
        },
        'category_interpretations': {
            'love': ['新しい恋愛の始まり。純粋な気持ちで相手と向き合って'],
            'career': ['転職や新しいプロジェクトに挑戦する絶好のタイミング'],
            'health': ['新しい健康習慣を始めるのに最適な時期'],
            'finance': ['新しい投資や収入源の開拓に向いています'],
            'spiritual': ['スピリチュアルな探求の新しい段階に入ります'],
            'general': ['人生の新しいサイクルが始まる重要な時期'],
        },
        'timing_messages': {
            'morning': ['朝の新鮮なエネルギーと共に、新しい一日を始めましょう'],
            'afternoon': ['午後の活動的な時間に、新しいアイデアを実行に移して'],
            'evening': ['夜の静けさの中で、明日への新しい計画を立てましょう'],
            'weekly': ['今週は新しいことを始めるのに最適な期間です'],
            'monthly': ['今月は人生の新しい章が始まる重要な月になります'],
        },
        'poetic_expressions': ['崖っぷちに立つ若者、無限の可能性を背負って空に舞う', '白いバラを手に、未知なる世界への扉を開く冒険者'],
        'psychological_insights': ['新しい経験への開放性が高く、学習能力に優れています', '直感的な判断力と楽観的な世界観を持っています'],
        'practical_advice': ['計画しすぎず、直感に従って行動することが大切です', '新しい環境や人々との出会いを積極的に求めてください'],
    },
    'ace-of-wands': {
        'upright_interpretations': ['創造的なエネルギーが爆発的に湧き上がる時。新しいプロジェクトの開始に最適', '情熱の炎が燃え上がり、行動への強い衝動を感じるでしょう'],
        'reversed_interpretations': ['エネルギーが分散し、焦点を絞れない状態。計画の見直しが必要', '創造力が枯渇気味。休息を取って内なる火を再び燃やして'],
        'position_interpretations': {
            'past': ['過去の情熱的な体験が現在の基盤となっています'],
            'present': ['今こそ行動を起こすべき時です'],
            'future': ['創造的なプロジェクトが成功します'],
            'advice': ['情熱に従って積極的に行動してください'],
            'obstacle': ['エネルギーの分散が妨げとなっています'],
            'outcome': ['新しい創造的な成果を得られます'],
            'inner_self': ['内なる炎が燃え上がっています'],
            'environment': ['創造性を支援する環境に恵まれています'],
            'hopes': ['創造的な自己実現を望んでいます'],
            'fears': ['エネルギーの枯渇を恐れています'],
        },
        'category_interpretations': {
            'love': ['新しい恋愛の始まり。情熱的な関係が期待できます'],
            'career': ['新しいプロジェクトや起業に最適なタイミング'],
            'health': ['エネルギーレベルが高く、活力に満ちています'],
            'finance': ['新しい収入源や投資機会が現れます'],
            'spiritual': ['創造的なスピリチュアル実践が開花します'],
            'general': ['新しいサイクルの始まりで、可能性が無限大です'],
        },
        'timing_messages': {
            'morning': ['朝の力強いエネルギーで新しいことを始めましょう'],
            'afternoon': ['午後の活動的な時間に創造的作業を'],
            'evening': ['夜は明日のプロジェクトの準備を'],
            'weekly': ['今週は新しい挑戦を始める最適な期間'],
            'monthly': ['今月は創造的エネルギーが最高潮に達します'],
        },
        'poetic_expressions': ['雲から差し伸べられた手が、炎の杖を差し出している', '新しい創造の火種が、心の奥底で静かに燃え始める'],
        'psychological_insights': ['創造的な衝動と実行力が高いレベルで統合されています', '新しいアイデアを形にする能力に優れています'],
        'practical_advice': ['今すぐにでも新しいプロジェクトを開始してください', '創造的な活動に時間とエネルギーを投資しましょう'],
    },
}


def get_tarot_card(card_id: Union[int, str, None]) -> Optional[Dict]:
    """デッキ上の位置（0-77）またはidでカードを取得する。見つからなければNone"""
    if isinstance(card_id, bool):
        return None
    if isinstance(card_id, int):
        if 0 <= card_id < len(ALL_TAROT_CARDS):
            return ALL_TAROT_CARDS[card_id]
        return None
    if isinstance(card_id, str):
        return _CARDS_BY_ID.get(card_id)
    return None


def get_cards_by_suit(suit: str) -> List[Dict]:
    return [card for card in MINOR_ARCANA if card.get('suit') == suit]


def get_cards_by_arcana(arcana: str) -> List[Dict]:
    return [card for card in ALL_TAROT_CARDS if card['arcana'] == arcana]
