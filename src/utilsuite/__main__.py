from utilsuite.cli.app import app

app()
