from jiofiwidget.cli import app

app()
