"""JD Match Analyzer: upload a job description and a resume, view the match report."""
