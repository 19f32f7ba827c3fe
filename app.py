# app.py
"""
Thin entrypoint for the API.

Usage example:
    uvicorn app:app --reload
    python app.py
"""

from profile_api.main import app, run  # re-export FastAPI instance

if __name__ == "__main__":
    run()
