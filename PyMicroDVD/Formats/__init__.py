"""
PyMicroDVD.Formats - Format-specific file handlers
"""
