from doc_intake.database.connection import get_connection
from doc_intake.database.models import SystemSettingRecord


class SystemSettingsRepository:
    """Read-only access to the systemsettings_fs key-value table."""

    def find_by_key(self, setting_key: str) -> SystemSettingRecord | None:
        """Fetch a single setting. Absence is not an error: returns None."""
        with get_connection() as conn:
            with conn.cursor() as cur:
                cur.execute(
                    "SELECT setting_value FROM systemsettings_fs WHERE setting_key = %s",
                    (setting_key,),
                )
                row = cur.fetchone()

        if row is None:
            return None

        value = row[0]
        return SystemSettingRecord(
            setting_key=setting_key,
            setting_value=None if value is None else str(value),
        )
