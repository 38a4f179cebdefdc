"""Team hub cross-reference passes and collection merging."""
