"""
Storage abstractions for the Clinic Relay runtime.

Includes:
- LogStore: the file-backed sequence of LogRecords (logs.json)
"""
