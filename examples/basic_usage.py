"""Basic usage example for RangeChart."""

import pandas as pd

from rangechart import Config, InMemoryGrid, RangeChartService


def chart_sales_by_region():
    """Example of grouping a selected range by its category column."""
    df = pd.DataFrame(
        {
            "region": ["North", "North", "South", "North", "South"],
            "product": ["Apples", "Pears", "Apples", "Apples", "Pears"],
            "revenue": [100, 50, 70, 30, 20],
            "units": [10, 5, 7, 3, 2],
        }
    )
    grid = InMemoryGrid.from_dataframe(df)
    service = RangeChartService.from_grid(grid, config=Config(log_level="INFO"))

    # Rows 0-4 of every column from region to units
    cell_range = grid.create_cell_range(0, 4, column_start="region", column_end="units")
    dataset, errors = service.get_chart_data(cell_range, agg_func="sum")

    if errors:
        print(f"Errors: {errors}")

    print(f"Categories: {dataset.category_ids}")
    print(f"Series: {dict(zip(dataset.col_ids, dataset.col_display_names, strict=True))}")
    print(dataset.to_dataframe(use_display_names=True))


def chart_filtered_rows():
    """Example of a range that shrinks when the grid is filtered."""
    df = pd.DataFrame({"team": ["a", "b", "c", "d"], "points": [4, 8, 15, 16]})
    grid = InMemoryGrid.from_dataframe(df)
    service = RangeChartService.from_grid(grid, config=Config())

    cell_range = grid.create_cell_range(0, 3, columns=["team", "points"])
    grid.row_model.set_filter(lambda row: row["points"] > 10)

    dataset, errors = service.get_chart_data(cell_range)
    print(f"Rows after filter: {dataset.rows} errors={errors}")


if __name__ == "__main__":
    chart_sales_by_region()
    chart_filtered_rows()
