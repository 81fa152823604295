"""Model reply parsing package.

Module split:
    - `json_extractor`: best-effort JSON object extraction from free text.
    - `robot_mapper`: wire robot payload -> internal link/joint records.
"""
