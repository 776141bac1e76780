"""
CLI: comandos typer sobre provctl.core.
"""
