"""Lingua backend: translation and sentence splitting over generative models."""
