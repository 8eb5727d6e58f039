"""Sample conference code base analysed by the architecture tests."""
