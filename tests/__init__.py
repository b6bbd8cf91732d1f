"""Test suite for the Tavily agent tools."""
