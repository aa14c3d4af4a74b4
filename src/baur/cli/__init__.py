"""Capa CLI: parsing de argumentos estilo pacman, dispatch y componentes Rich."""
