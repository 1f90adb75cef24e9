import os

from catalog_builder import create_app

app = create_app(os.getenv("FLASK_CONFIG", "development"))
