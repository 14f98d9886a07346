"""Services package - Session mode logic for the shell.

Service Modules:
- mode_registry: Catalogue of session modes and their records
- mode_resolver: Merges the requested mode with the default and activates it
- capability_service: Presence probes for optional indicator providers
- session_service: Session-start callbacks for the login and user sessions

Infrastructure:
- exceptions: Custom exception classes for service layer errors
- logging_utils: Structured logging helpers
"""
