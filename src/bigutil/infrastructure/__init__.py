"""Infrastructure adapters: storage column types and the logging facade."""
