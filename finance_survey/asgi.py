"""ASGI entry point.

    uvicorn finance_survey.asgi:app --host 0.0.0.0 --port 8000
"""

from finance_survey.main import create_app

app = create_app()
