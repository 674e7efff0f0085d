"""
Configuration Package for the Image to MVI converter.

This package centralizes all the static configuration settings for the application.
By separating configuration from the application logic, it becomes easier to manage
and modify parameters without changing the core code.

This package includes settings for:
- Accepted image extensions, the resolution matrix and the FFmpeg encoding parameters.
- Common application settings like the logging format, job statuses and exit codes.
- User-overridable settings for the FFmpeg location and the package feed.
"""
