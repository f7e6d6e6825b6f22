# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TASKLIST_APP_NAME": "App display name, also the log file stem (default: tasklist).",
    "TASKLIST_LOG_LEVEL": "Console logging level (default: WARNING).",
    "TASKLIST_LOG_FILE_ENABLED": "Also write DEBUG logs to <data_dir>/<app_name>.log (true/false).",
    # Console
    "TASKLIST_PROMPT": "Console prompt (default: '> ').",
    "TASKLIST_CONSOLE_BANNER": "Print the help hint on start (true/false, default: true).",
    # Paths (gitignored)
    "TASKLIST_DATA_DIR": "Local data directory for logs (default: .local/tasklist).",
}
