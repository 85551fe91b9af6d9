import asyncio

def main():
    """Main entry point for the package."""
    # Lazy import so the package can be imported without building the MCP app
    from . import server
    asyncio.run(server.main())

__all__ = [
    "main",
]
