from econskills.cli.main import app

app()
