from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = "menucost"
    env: str = "local"
    log_level: str = "INFO"

    database_url: str = "sqlite:///./menucost.db"

    # Reject usage units that aren't compatible with an item's purchase unit.
    # False restores the old behaviour: unmapped pairs convert 1:1 with a warning.
    strict_unit_pairing: bool = True

    # Display precision; costing itself always runs at full precision
    unit_price_decimals: int = 4
    money_decimals: int = 2

    class Config:
        env_file = ".env"
        env_prefix = "MENUCOST_"


settings = Settings()
