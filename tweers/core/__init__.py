"""Shared configuration, logging and exceptions."""
