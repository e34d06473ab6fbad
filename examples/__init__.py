"""Runnable front ends built on prototypelab."""
