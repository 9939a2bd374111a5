import os

try:
    # Optional: load .env if python-dotenv is installed
    from dotenv import load_dotenv  # type: ignore
    load_dotenv()
except ImportError:
    pass


def _env_int(name, default):
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")


class ShapeScanConfig:
    """
    Central configuration object.

    Detection itself is parameterised by module constants (binary threshold,
    noise floor); only the surrounding tooling is configurable here.
    """

    def __init__(
        self,
        log_level=None,
        sample_size=None,
        output_dir=None,
    ):
        # Fallback to env if not provided
        self.log_level = (log_level or os.getenv("SHAPESCAN_LOG_LEVEL") or "WARNING").upper()
        self.sample_size = sample_size or _env_int("SHAPESCAN_SAMPLE_SIZE", 200)
        self.output_dir = output_dir or os.getenv("SHAPESCAN_OUTPUT_DIR") or "output"
        if self.sample_size <= 0:
            raise ValueError("sample_size must be positive")
