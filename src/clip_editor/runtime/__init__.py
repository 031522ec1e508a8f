"""Logging and configuration services shared by the editor."""
