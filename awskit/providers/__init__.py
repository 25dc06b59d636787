"""boto3-backed implementations of the awskit interfaces."""
