"""占術の静的データ（カード・卦・ルーンなど）"""
