# /main.py
# Backend entry point. Importing src.core.config runs the environment gate
# before anything else touches configuration.
from src.core.logger import configure_logging, get_logger
from src.core.config import env


def main():
    configure_logging()
    log = get_logger("StellarStream.System")
    log.info("BACKEND_CONFIG_LOADED", **env.redacted())


if __name__ == "__main__":
    main()
