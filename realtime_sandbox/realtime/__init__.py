"""Realtime infrastructure (Socket.IO).

Holds the Socket.IO server factory, its namespaces, and the publishers that
emit events to connected clients.
"""
