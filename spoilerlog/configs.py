import os
from pathlib import Path
from spoilerlog.utils.config import load_yaml, merge_dicts
CONF_DIR = Path(__file__).resolve().parents[1] / "configs"
DEFAULTS = {
    "reader": {"encoding": "utf-8", "errors": "ignore"},
    "logging": {"name": "spoilerlog", "level": "INFO", "log_dir": None, "rotate": "none"},
}
def config_path() -> str:
    return os.environ.get("SPOILERLOG_CONFIG") or str(CONF_DIR / "application.yaml")
def load_app_config(path: str | None = None) -> dict:
    return merge_dicts(DEFAULTS, load_yaml(path or config_path()))
APP_CFG = load_app_config()
READER_CFG = APP_CFG["reader"]
LOGGING_CFG = APP_CFG["logging"]
LOGGER_KEYS = ("name", "level", "log_dir", "rotate", "max_bytes", "backup_count")
def logger_kwargs(cfg: dict) -> dict:
    """只保留 get_logger 认识的参数, 其余配置项忽略"""
    return {k: v for k, v in (cfg or {}).items() if k in LOGGER_KEYS}
