"""Dynamic-programming brachistochrone solver and the control logic of its simulation front end."""

__version__ = "0.1.0"
__all__ = ["__version__"]