"""Layer 6: Delivery - BRD to implementation activities and test cases."""

from .delivery_generator import DeliveryGenerator, get_delivery_generator

__all__ = ["DeliveryGenerator", "get_delivery_generator"]
