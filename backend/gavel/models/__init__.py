from gavel.models.job import JOB_COLUMNS, Job

__all__ = ["Job", "JOB_COLUMNS"]
