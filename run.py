import os
from dotenv import load_dotenv
from app import create_app

load_dotenv()

config_name = os.getenv('FLASK_ENV', 'development')

app = create_app(config_name)

if __name__ == '__main__':
    # In production run behind a WSGI server (gunicorn etc.)
    app.run(
        host='0.0.0.0',
        port=int(os.getenv('PORT', 8000)),
        debug=(config_name == 'development')
    )
