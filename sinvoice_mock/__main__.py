"""Module entrypoint for running the mock SInvoice server."""

from .main import run

if __name__ == "__main__":
    run()
