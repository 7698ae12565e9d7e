from .initializer import LayoutInitializer, LayoutReport, setup_hiring_hub_layout


__all__ = [
    "LayoutInitializer",
    "LayoutReport",
    "setup_hiring_hub_layout",
]
