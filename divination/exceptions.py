"""占術エンジンの例外"""


class DivinationError(Exception):
    """占術処理の基底例外"""


class UnknownDivinationTypeError(DivinationError):
    def __init__(self, divination_type: str):
        super().__init__(f"Unknown divination type: {divination_type}")
        self.divination_type = divination_type


class InvalidOptionError(DivinationError):
    """明示的に指定されたオプションが不正"""
