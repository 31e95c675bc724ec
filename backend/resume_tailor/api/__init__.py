from resume_tailor.api import (
    tailor_routes,
    wizard_routes,
    history_routes,
    download_routes,
    llm_routes,
)

__all__ = [
    "tailor_routes",
    "wizard_routes",
    "history_routes",
    "download_routes",
    "llm_routes",
]
