import os
import json
from typing import List, Optional, Union

from dotenv import load_dotenv
from pydantic_settings import BaseSettings
from pydantic import field_validator

project_root = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
env_path = os.path.join(project_root, '.env')
load_dotenv(env_path)


class Settings(BaseSettings):
    # 基本设置
    API_V1_STR: str = "/api"
    PROJECT_NAME: str = "Product API"
    VERSION: str = "0.1.0"

    # CORS 设置
    CORS_ORIGINS: List[str] = ["*"]

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v: Union[str, List[str]]) -> List[str]:
        if isinstance(v, str):
            # JSON array first, then a comma separated list
            try:
                return json.loads(v)
            except json.JSONDecodeError:
                if v.startswith("[") and v.endswith("]"):
                    v = v.strip("[]").strip()
                    if v:
                        return [i.strip().strip('"\'') for i in v.split(",")]
                    return []
                else:
                    return [i.strip() for i in v.split(",") if i.strip()]

        if isinstance(v, list):
            return v

        return []

    # 数据库设置
    DATABASE_URI: Optional[str] = None
    DB_ECHO: bool = False

    @property
    def SQLALCHEMY_DATABASE_URI(self) -> str:
        """
        获取数据库URI

        Without an explicit DATABASE_URI the service runs on an in-memory
        SQLite database whose contents are lost when the process exits.
        """
        if self.DATABASE_URI:
            return self.DATABASE_URI

        return "sqlite://"

    @property
    def IS_SQLITE(self) -> bool:
        return self.SQLALCHEMY_DATABASE_URI.startswith("sqlite")

    @property
    def IS_IN_MEMORY(self) -> bool:
        uri = self.SQLALCHEMY_DATABASE_URI
        return self.IS_SQLITE and (uri in ("sqlite://", "sqlite:///") or ":memory:" in uri)

    # 是否自动创建数据库表结构
    CREATE_TABLES: bool = True

    # 服务器启动配置
    HOST: str = "0.0.0.0"
    PORT: int = 8080
    RELOAD: bool = False

    # 日志配置
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_DIR: str = os.getenv("LOG_DIR", "logs")
    LOG_TO_FILE: bool = True

    class Config:
        case_sensitive = True
        env_file = ".env"


# 创建设置实例
settings = Settings()
