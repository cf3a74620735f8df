# main.py
# uvicorn main:app --reload
from handout_tracker.app import create_app

app = create_app()
