import os

# Must be set before settings is imported by any test module
os.environ["PLATFORM_ENVIRONMENT"] = "test"
os.environ.pop("RESEND_API_KEY", None)
os.environ.pop("OWNER_EMAIL", None)
