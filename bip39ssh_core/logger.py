import logging, json, sys, time, os


def get_logger(name="bip39ssh", level=None, to_file=None):
    """Structured logger shared by all bip39ssh components.

    Secrets (mnemonic, passphrase, seed, key material) must never reach it.
    """
    logger = logging.getLogger(name)
    if level is None:
        level = os.getenv("BIP39SSH_LOG_LEVEL", "INFO").upper()
    logger.setLevel(level)

    if not logger.handlers:
        # stdout carries CLI output; logs go to stderr
        handler = logging.StreamHandler(sys.stderr)
        formatter = logging.Formatter(
            fmt=json.dumps({
                "ts": "%(asctime)s",
                "level": "%(levelname)s",
                "name": "%(name)s",
                "msg": "%(message)s"
            }),
            datefmt="%Y-%m-%dT%H:%M:%SZ",
        )
        formatter.converter = time.gmtime  # Use UTC timestamps
        handler.setFormatter(formatter)
        logger.addHandler(handler)

        if to_file:
            # Ensure the directory exists before writing
            os.makedirs(os.path.dirname(to_file) or ".", exist_ok=True)
            file_handler = logging.FileHandler(to_file)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    return logger
