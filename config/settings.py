"""アプリケーション設定"""
from pydantic_settings import BaseSettings
import os


class Settings(BaseSettings):
    """アプリケーションの設定"""
    
    # API
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    
    # Application
    debug: bool = False
    log_level: str = "INFO"
    
    # 占術エンジン
    # Trueにするとシードに現在時刻が加わり、同じ入力でも呼び出しごとに結果が変わる
    seed_include_wall_clock: bool = False
    seed_modulus: int = 1000000
    default_tarot_spread: str = "three-card"
    
    class Config:
        env_file = ".env" if os.path.exists(".env") else None
        case_sensitive = False
        extra = "ignore"


settings = Settings()
