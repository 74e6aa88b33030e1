import os
from pathlib import Path
from typing import Dict, MutableMapping, Optional

from appdirs import user_data_dir


class EnvManager:
    """Hands settings from the CLI to the uvicorn worker processes

    uvicorn imports the app by name in fresh processes (and again on reload), so
    settings are stashed in a file under the user data directory and read back
    into os.environ by get_environ
    """

    env_dir = Path(user_data_dir("gqlhttp"))
    env_file = env_dir / "settings.env"

    def __init__(self, **env_vars: Optional[str]) -> None:
        self.env_vars = {key: str(val) for key, val in env_vars.items() if val is not None}

    def __enter__(self) -> "EnvManager":
        self.env_dir.mkdir(parents=True, exist_ok=True)
        self.env_file.write_text("".join(f"{key}={val}\n" for key, val in self.env_vars.items()))
        return self

    def __exit__(self, exc_type, exc_value, exc_traceback) -> None:
        self.clear()

    @classmethod
    def clear(cls) -> None:
        try:
            cls.env_file.unlink()
        except FileNotFoundError:
            pass

    @classmethod
    def read(cls) -> Dict[str, str]:
        """Stashed settings, empty if nothing is stashed"""
        try:
            text = cls.env_file.read_text()
        except FileNotFoundError:
            return {}

        stashed = {}
        for line in text.splitlines():
            if "=" not in line:
                continue
            key, value = line.split("=", 1)
            stashed[key.strip()] = value.strip()
        return stashed

    @classmethod
    def get_environ(cls) -> MutableMapping[str, str]:
        os.environ.update(cls.read())
        return os.environ
