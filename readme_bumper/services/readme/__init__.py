from readme_bumper.services.readme.readme_service import ReadmeUpsertService

__all__ = ["ReadmeUpsertService"]
