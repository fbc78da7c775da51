import os
import sys

from dotenv import load_dotenv

from order_ui.enums.runtime_environment import RuntimeEnvironment

# Load .env but don't override existing environment variables
# This allows test scripts to set RUNTIME_ENVIRONMENT=TEST before import
load_dotenv(".env", override=False)

# Parse RUNTIME_ENVIRONMENT with clear error message on misconfiguration
# Unset means PROD: this package is embedded in other services
try:
    _runtime_env_str = os.environ.get("RUNTIME_ENVIRONMENT") or RuntimeEnvironment.PROD.value
    RUNTIME_ENVIRONMENT = RuntimeEnvironment(_runtime_env_str.strip().upper())
except ValueError as e:
    valid_values = [env.value for env in RuntimeEnvironment]
    print(f"\n ERROR: Invalid RUNTIME_ENVIRONMENT configuration\n", file=sys.stderr)
    print(f"Reason: {e}", file=sys.stderr)
    print(f"Valid values: {', '.join(valid_values)}", file=sys.stderr)
    print(f"Current value: {os.environ.get('RUNTIME_ENVIRONMENT', '(not set)')}", file=sys.stderr)
    print(f"\nAdd to .env: RUNTIME_ENVIRONMENT={valid_values[0]}\n", file=sys.stderr)
    sys.exit(1)

# Stage Copy Configuration
COPY_LANGUAGE = os.environ.get("COPY_LANGUAGE", "en")  # Language for stage title/subtitle copy

# Logging Configuration
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")  # DEBUG, INFO, WARNING, ERROR, CRITICAL
LOG_MASK_SECRETS = os.environ.get("LOG_MASK_SECRETS", "true") == "true"  # Mask sensitive data in logs
LOG_DIR = os.environ.get("LOG_DIR", "logs")

# Log Retention: Environment-specific defaults
# Dev: keep a month of logs for debugging
# Prod: Use 5 days default to save disk space
try:
    if RUNTIME_ENVIRONMENT == RuntimeEnvironment.DEV:
        LOG_RETENTION_DAYS = int(os.environ.get("LOG_RETENTION_DAYS", "30"))
    else:
        LOG_RETENTION_DAYS = int(os.environ.get("LOG_RETENTION_DAYS", "5"))
except ValueError as e:
    print(f"\n ERROR: Invalid LOG_RETENTION_DAYS configuration\n", file=sys.stderr)
    print(f"Reason: {e}", file=sys.stderr)
    print(f"Expected format: positive integer (days)", file=sys.stderr)
    print(f"Current value: {os.environ.get('LOG_RETENTION_DAYS', '(not set)')}\n", file=sys.stderr)
    sys.exit(1)
