"""Run the API with `python -m schedule_api`."""

from schedule_api.main import run

if __name__ == "__main__":
    run()
