# backend/itemservice/core/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix='ITEMS_', env_file='.env', env_file_encoding='utf-8')

    app_name: str = 'Item Service'
    debug: bool = False
    seed_sample_data: bool = True
    # False runs only the object-level rule on edit submissions
    validate_fields_on_update: bool = True
    log_json: bool = False
    log_level: str = 'INFO'


settings = Settings()
