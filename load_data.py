# load_data.py
"""
Load the bundled Jeep catalog CSV into the database.

Run scripts/init_db.py first on a fresh database.
"""

from scripts.ingest import parse_jeep_csv, load_into_db, FILE_PATH


def main():
    records, stats = parse_jeep_csv(FILE_PATH)
    load_into_db(records)

    print("Load complete.")
    print(f"Total CSV rows read:   {stats['n_rows']}")
    print(f"Catalog rows loaded:   {stats['n_records']}")
    print(f"Rows with errors:      {stats['n_errors']}")
    print(f"Duplicate models:      {stats['n_duplicates']}")


if __name__ == "__main__":
    main()
