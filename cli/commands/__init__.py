"""subcomb CLI commands"""
