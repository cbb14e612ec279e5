import marimo

__generated_with = "0.17.6"
app = marimo.App(width="medium")


@app.cell
def _():
    from csv_export import load_videos
    from scraper_config import OUTPUT_FILE
    return OUTPUT_FILE, load_videos


@app.cell
def _(OUTPUT_FILE, load_videos):
    # Opening the scraped videos CSV
    videos = load_videos(OUTPUT_FILE)
    return (videos,)


@app.cell
def _(videos):
    # Printing the total number of videos
    print(videos.shape[0])
    return


@app.cell
def _(videos):
    # Number of videos per channel
    videos["Channel"].value_counts()
    return


@app.cell
def _(videos):
    # Rows with no channel name
    videos[videos["Channel"] == ""]
    return


@app.cell
def _(videos):
    videos.head()
    return


if __name__ == "__main__":
    app.run()
