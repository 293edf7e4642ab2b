"""Google Scholar URL templates."""

# Works listing for a profile, filtered to patents
PATENTS_LIST_PATH = "/citations?view_op=list_works&user={profile_id}&mauthors=patent"

# Profile identifier inside a user-supplied profile URL
PROFILE_ID_PATTERN = r"user=([^&]+)"
