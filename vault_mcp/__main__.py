from .cli import app

app(prog_name="obsidian-vault-mcp")
