# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
Do NOT commit real secrets. Put them in .env (local, gitignored).

This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "ZENITH_APP_NAME": "App display name (default: Zenith Tasker).",
    "ZENITH_LOG_LEVEL": "Console logging level (default: INFO).",
    "ZENITH_LOG_DIR": "Directory for zenith.log (default: .local/zenith).",
    # LLM / OpenRouter
    "ZENITH_OPENROUTER_API_KEY": (
        "API key for the AI summary (falls back to OPENROUTER_API_KEY, then API_KEY). "
        "Without it /analyze answers with a fixed message and makes no call."
    ),
    "ZENITH_OPENROUTER_BASE_URL": "OpenAI-compatible base URL (default: https://openrouter.ai/api/v1).",
    "ZENITH_LLM_MODELS": "Comma/space separated list of models to try in order.",
    "ZENITH_HTTP_REFERER": "Optional OpenRouter metadata header.",
    "ZENITH_LLM_CONNECT_TIMEOUT_SECONDS": "Connect timeout (default: 5).",
    "ZENITH_LLM_READ_TIMEOUT_SECONDS": "Read timeout (default: 60).",
    # Calendar
    "ZENITH_SEED_DEMO_TASKS": "Start with four demo tasks around today (default: true).",
    "ZENITH_DAY_DOTS_LIMIT": "Max status marks per calendar day (default: 3).",
}
