"""Pull request triage: poll, review, classify risk, approve."""
