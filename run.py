from promptlist import create_app
import os

# This file exists solely for gunicorn to have a WSGI entry point
app = create_app(os.getenv('FLASK_ENV', 'development'))

if __name__ == '__main__':
    app.run(
        host=os.getenv('FLASK_HOST', app.config['HOST']),
        port=int(os.getenv('FLASK_PORT', app.config['PORT'])),
        debug=app.debug
    )
