# Portfolio backend entry point
# `flask --app app run` for development, `gunicorn app:app` in production.
# Without DATABASE_URL everything is kept in memory and lost on restart.

from portfolio import create_app

app = create_app()

if __name__ == '__main__':
    app.run(debug=app.config.get('DEBUG', False), host='0.0.0.0', port=5000)
