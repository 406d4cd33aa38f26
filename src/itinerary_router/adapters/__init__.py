"""
Adapter implementations for the Itinerary Router.

Adapters are concrete implementations of the port interfaces.
They handle the specifics of algorithms and process-wide metrics.
"""
