"""Chain of Responsibility: requests passed along handlers."""
