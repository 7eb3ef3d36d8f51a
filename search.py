"""
Hebrew Pattern Tool

Main entry point for searching Hebrew word lists with a template.

This is a convenience wrapper that calls the main CLI function.
"""

if __name__ == "__main__":
    # Import and run the main CLI function
    # Local imports
    from hebrew_pattern_tool.adapters.cli.main import main

    main()
