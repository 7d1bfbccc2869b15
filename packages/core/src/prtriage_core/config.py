import os
from pathlib import Path

import yaml

DEFAULT_CONFIG: dict = {
    "model": "gpt-3.5-turbo",
    "max_tokens": 3000,
    "temperature": 0.1,
    "poll_interval": 60,  # seconds to sleep between polling cycles
}


def load_config(config_path: str = ".prtriage.yml") -> dict:
    """
    Load configuration by merging (in order of precedence):
      1. Built-in defaults
      2. .prtriage.yml in the current directory
      3. Reviewer identity and credentials from the environment

    Missing credentials are left as None; requests made with them fail
    at the transport layer.
    """
    config = dict(DEFAULT_CONFIG)

    path = Path(config_path)
    if path.exists():
        with open(path) as f:
            file_config = yaml.safe_load(f) or {}
        config.update(file_config)

    config["github_username"] = os.environ.get("GITHUB_USERNAME")
    config["github_token"] = os.environ.get("GITHUB_TOKEN")
    config["openai_api_key"] = os.environ.get("OPENAI_API_KEY")

    return config
