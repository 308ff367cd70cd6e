from dotenv import load_dotenv
import os

# Load environment variables from .env file before the config class is read.
load_dotenv()

from examquiz_app import create_app  # noqa: E402

app = create_app()

if __name__ == '__main__':
    app.run(
        host=os.environ.get('HOST', '0.0.0.0'),
        port=int(os.environ.get('PORT', 5000)),
        debug=os.environ.get('FLASK_DEBUG') == '1',
    )
