# parse_data.py
"""
Parse the Jeep catalog CSV and print basic stats without touching the database.
"""

from scripts.ingest import parse_jeep_csv, FILE_PATH


def main():
    records, stats = parse_jeep_csv(FILE_PATH)

    print(f"Total CSV rows read:   {stats['n_rows']}")
    print(f"Catalog rows parsed:   {stats['n_records']}")
    print(f"Rows with errors:      {stats['n_errors']}")
    print(f"Duplicate models:      {stats['n_duplicates']}")

    if stats["error_examples"]:
        print("\nExample errors:")
        for ex in stats["error_examples"]:
            print(f"- Row {ex['row_number']}: {ex['error']}")


if __name__ == "__main__":
    main()
