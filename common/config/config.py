"""
Configuration module for the GitHub content backend.

Values are read from the environment (optionally populated from a .env file)
and exposed as module-level constants.
"""

import os

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# GitHub API
GITHUB_API_URL = os.getenv("GITHUB_API_URL", "https://api.github.com").rstrip("/")
GITHUB_API_VERSION = os.getenv("GITHUB_API_VERSION", "2022-11-28")

# Repository defaults
GITHUB_REPOSITORY = os.getenv("GITHUB_REPOSITORY")
GITHUB_BRANCH = os.getenv("GITHUB_BRANCH", "main")
GITHUB_ACCESS_TOKEN = os.getenv("GITHUB_ACCESS_TOKEN")

# Transport timeouts (seconds)
GITHUB_REQUEST_TIMEOUT = float(os.getenv("GITHUB_REQUEST_TIMEOUT", "150"))
GITHUB_CONNECT_TIMEOUT = float(os.getenv("GITHUB_CONNECT_TIMEOUT", "60"))

# Tree entry modes
FILE_MODE = "100644"
DIRECTORY_MODE = "040000"
