"""
Agents used by the Clinic Relay runtime.

For now there is a single IntakeAgent that:

- receives a raw patient message
- asks the extractor for structured data
- appends one LogRecord to the LogStore
"""
