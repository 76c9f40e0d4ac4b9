#setup: pip install -e ".[test]"
#setup: flask --app moneyjar.wsgi run --port 3000 --debug

from moneyjar.app import create_app

app = create_app()


if __name__ == "__main__":
    app.run(port=3000, debug=app.extensions["moneyjar.settings"].log_level == "DEBUG")
