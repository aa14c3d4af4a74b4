"""baur: instala paquetes del AUR con una interfaz al estilo pacman."""

__version__ = "0.1.0"
