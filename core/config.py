"""
配置文件 - 项目配置管理
"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import BaseModel, Field
from typing import Optional


class LocationSettings(BaseModel):
    # 从 record 上读取标识符的属性名
    identifier: str = "id"
    # 命名空间分隔符；未设置时只使用最内层类名
    namespace: Optional[str] = None
    class_underscore: bool = False
    token_bytes: int = 16


class Settings(BaseSettings):
    """项目配置"""

    # 基础配置
    PROJECT_NAME: str = Field(default="Upload Location Generator")
    VERSION: str = Field(default="1.0.0")
    DEBUG: bool = Field(default=True)
    ENVIRONMENT: str = Field(default="development")

    # 日志级别，未设置时按 DEBUG 推断
    LOG_LEVEL: Optional[str] = Field(default=None)

    # 分组配置：存储路径生成采用嵌套模型
    location: LocationSettings = Field(default_factory=LocationSettings)

    # pydantic-settings v2 configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="allow",
        env_nested_delimiter="__",
    )


settings = Settings()
