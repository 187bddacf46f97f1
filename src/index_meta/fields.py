DISTANCE_TYPE = "distance_type"
INDEX_TYPE = "index_type"
NUM_INDEXED_ROWS = "num_indexed_rows"
NUM_UNINDEXED_ROWS = "num_unindexed_rows"

FIELD_NAMES = (DISTANCE_TYPE, INDEX_TYPE, NUM_INDEXED_ROWS, NUM_UNINDEXED_ROWS)
