"""
Centralized SQL queries for the Mixed In Key and DJUCED databases.

Mixed In Key stores its library as a Core Data SQLite file (Z-prefixed
tables and columns). DJUCED keys cues by the track's absolute path.
"""

# Mixed In Key (source, read-only)
GET_ANALYSED_SONGS = """
SELECT Z_PK, ZFILESIZE, ZENERGY, ZTEMPO, ZKEY, ZARTIST, ZNAME, ZBOOKMARKDATA
FROM ZSONG
"""

GET_SONG_CUES = "SELECT ZTIME, ZNAME FROM ZCUEPOINT WHERE ZSONG = ?"

COUNT_ANALYSED_SONGS = "SELECT COUNT(*) FROM ZSONG"

# DJUCED (destination, read-write)
DELETE_USER_CUES = "DELETE FROM trackCues WHERE trackId = ? AND cuenumber < ?"

INSERT_CUE = """
INSERT INTO trackCues (trackId, cuename, cuenumber, cuepos, loopLength, cueColor, isSavedLoop)
VALUES (?, ?, ?, ?, 0, ?, 0)
"""

UPDATE_TRACK_ANALYSIS = """
UPDATE tracks
SET artist = ?, title = ?, bpm = ?, key = ?, comment = ?
WHERE absolutepath = ?
"""

CHECK_TABLE_EXISTS = "SELECT name FROM sqlite_master WHERE type='table' AND name=?"
