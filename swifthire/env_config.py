"""
Environment configuration utilities for SwiftHire project
"""
import os
from pathlib import Path

def load_env_file(env_file_path=None):
    """Load environment variables from .env file"""
    if env_file_path is None:
        env_file_path = Path(__file__).resolve().parent.parent / '.env'

    if not os.path.exists(env_file_path):
        return

    with open(env_file_path, 'r') as f:
        for raw_line in f:
            line = raw_line.strip()
            if not line or line.startswith('#') or '=' not in line:
                continue
            key, value = line.split('=', 1)
            os.environ.setdefault(key.strip(), value.strip().strip('"').strip("'"))

def get_env_var(key, default=None, required=False):
    """Get environment variable with optional default and required validation"""
    value = os.environ.get(key, default)
    if required and value is None:
        raise ValueError(f"Required environment variable '{key}' is not set")
    return value

def get_bool_env(key, default=False):
    value = os.environ.get(key, str(default)).lower()
    return value in ('true', '1', 'yes', 'on')

def get_int_env(key, default=0):
    """Get integer environment variable"""
    value = os.environ.get(key)
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"Environment variable '{key}' must be an integer, got '{value}'")

def get_list_env(key, default=None, separator=','):
    value = os.environ.get(key)
    if value:
        return [item.strip() for item in value.split(separator) if item.strip()]
    return default or []
