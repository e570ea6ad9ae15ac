from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # App
    debug: bool = False
    log_level: str = "INFO"

    # IRR bisection
    irr_max_iterations: int = 50
    irr_precision: float = 0.0001

    # Report
    report_title: str = "BTR Investment Financial Analysis"
    fund_name: str = "USDV BTR Opportunity Fund"


settings = Settings()
