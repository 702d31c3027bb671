from pydantic import Field
from pydantic_settings import BaseSettings
from typing import List

class Settings(BaseSettings):
    # App Info
    app_name: str = "TiendaDBII API"
    version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"
    
    # Database
    database_url: str = Field(
        default="sqlite:///./tiendadbii.db",
        description="URL de conexión SQLAlchemy"
    )
    create_tables_on_startup: bool = True
    
    # CORS
    allowed_origins: List[str] = ["*"]
    
    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    
    class Config:
        env_file = ".env"
        case_sensitive = False

settings = Settings()
