from cheatsheet.cli import app

app(prog_name="cheatsheet")
