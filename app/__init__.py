"""Vendor Thread Summarizer application package."""
