"""
Service layer abstraction.

Each service encapsulates the business logic for one collection of the
stored document.  Services receive the store as an argument so that
handlers and tests decide which storage backs them.
"""
