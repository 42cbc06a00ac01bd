# ABOUTME: Bundled sample dataset loaded by the seed runner and the test suite
# ABOUTME: Timestamps are epoch milliseconds; comments reference their article by title

DEFAULT_IMG_URL = "https://images.pexels.com/photos/158651/news-newsletter-newspaper-information-158651.jpeg?w=700&h=700"

TOPICS = [
    {"slug": "mitch", "description": "The man, the Mitch, the legend"},
    {"slug": "cats", "description": "Not dogs"},
    {"slug": "paper", "description": "what books are made of"},
]

USERS = [
    {
        "username": "butter_bridge",
        "name": "jonny",
        "avatar_url": "https://www.healthytherapies.com/wp-content/uploads/2016/06/Lime3.jpg",
    },
    {
        "username": "icellusedkars",
        "name": "sam",
        "avatar_url": "https://avatars2.githubusercontent.com/u/24604688?s=460&v=4",
    },
    {
        "username": "rogersop",
        "name": "paul",
        "avatar_url": "https://avatars2.githubusercontent.com/u/24394918?s=400&v=4",
    },
    {
        "username": "lurker",
        "name": "do_nothing",
        "avatar_url": "https://www.golenbock.com/wp-content/uploads/2015/01/placeholder-user.png",
    },
]

# Insertion order fixes article_id: the first article is article 1
ARTICLES = [
    {
        "title": "Living in the shadow of a great man",
        "topic": "mitch",
        "author": "butter_bridge",
        "body": "I find this existence challenging",
        "created_at": 1594325460000,
        "votes": 100,
        "article_img_url": DEFAULT_IMG_URL,
    },
    {
        "title": "Sony Vaio; or, The Laptop",
        "topic": "mitch",
        "author": "icellusedkars",
        "body": "Call me Mitchell. Some years ago, never mind how long precisely, I thought I would buy a laptop.",
        "created_at": 1602828180000,
        "votes": 0,
        "article_img_url": DEFAULT_IMG_URL,
    },
    {
        "title": "Eight pug gifs that remind me of mitch",
        "topic": "mitch",
        "author": "icellusedkars",
        "body": "some gifs",
        "created_at": 1604394720000,
        "votes": 0,
        "article_img_url": DEFAULT_IMG_URL,
    },
    {
        "title": "Student SUES Mitch!",
        "topic": "mitch",
        "author": "rogersop",
        "body": "We all love Mitch and his wonderful, unique typing style.",
        "created_at": 1588731240000,
        "votes": 0,
        "article_img_url": DEFAULT_IMG_URL,
    },
    {
        "title": "UNCOVERED: catspiracy to bring down democracy",
        "topic": "cats",
        "author": "rogersop",
        "body": "Bastet walks amongst us, and the cats are taking arms!",
        "created_at": 1596464040000,
        "votes": 0,
        "article_img_url": DEFAULT_IMG_URL,
    },
    {
        "title": "A",
        "topic": "mitch",
        "author": "icellusedkars",
        "body": "Delicious tin of cat food",
        "created_at": 1602986400000,
        "votes": 0,
        "article_img_url": DEFAULT_IMG_URL,
    },
    {
        "title": "Z",
        "topic": "mitch",
        "author": "icellusedkars",
        "body": "I was hungry.",
        "created_at": 1578406080000,
        "votes": 0,
        "article_img_url": DEFAULT_IMG_URL,
    },
    {
        "title": "Does Mitch predate civilisation?",
        "topic": "mitch",
        "author": "icellusedkars",
        "body": "Archaeologists have uncovered a gigantic statue from the dawn of humanity.",
        "created_at": 1587089280000,
        "votes": 0,
        "article_img_url": DEFAULT_IMG_URL,
    },
    {
        "title": "They're not exactly dogs, are they?",
        "topic": "mitch",
        "author": "butter_bridge",
        "body": "Well? Think about it.",
        "created_at": 1591438200000,
        "votes": 0,
        "article_img_url": DEFAULT_IMG_URL,
    },
    {
        "title": "Seven inspirational thought leaders from Manchester UK",
        "topic": "mitch",
        "author": "rogersop",
        "body": "Who are we kidding, there is only one, and it's Mitch!",
        "created_at": 1589433300000,
        "votes": 0,
        "article_img_url": DEFAULT_IMG_URL,
    },
    {
        "title": "Am I a cat?",
        "topic": "mitch",
        "author": "icellusedkars",
        "body": "Having run out of ideas for articles, I am staring at the wall blankly, like a cat.",
        "created_at": 1579126860000,
        "votes": 0,
        "article_img_url": DEFAULT_IMG_URL,
    },
    {
        "title": "Moustache",
        "topic": "mitch",
        "author": "butter_bridge",
        "body": "Have you seen the size of that thing?",
        "created_at": 1602419040000,
        "votes": 0,
        "article_img_url": DEFAULT_IMG_URL,
    },
    {
        "title": "Another article about Mitch",
        "topic": "mitch",
        "author": "butter_bridge",
        "body": "There will never be enough articles about Mitch!",
        "created_at": 1602419040000,
        "votes": 0,
        "article_img_url": DEFAULT_IMG_URL,
    },
]

COMMENTS = [
    {
        "body": "Oh, I've got compassion running out of my nose, pal! I'm the Sultan of Sentiment!",
        "votes": 16,
        "author": "butter_bridge",
        "article_title": "They're not exactly dogs, are they?",
        "created_at": 1586179020000,
    },
    {
        "body": "The beautiful thing about treasure is that it exists. Got to find out what kind of sheets these are.",
        "votes": 14,
        "author": "butter_bridge",
        "article_title": "Living in the shadow of a great man",
        "created_at": 1604113380000,
    },
    {
        "body": "Replacing the quiet elegance of the dark suit and tie with the casual indifference of these muted earth tones.",
        "votes": 100,
        "author": "icellusedkars",
        "article_title": "Living in the shadow of a great man",
        "created_at": 1583025180000,
    },
    {
        "body": " I carry a log - yes. Is it funny to you? It is not to me.",
        "votes": -100,
        "author": "icellusedkars",
        "article_title": "Living in the shadow of a great man",
        "created_at": 1582459260000,
    },
    {
        "body": "I hate streaming noses",
        "votes": 0,
        "author": "icellusedkars",
        "article_title": "Living in the shadow of a great man",
        "created_at": 1604437200000,
    },
    {
        "body": "I hate streaming eyes even more",
        "votes": 0,
        "author": "icellusedkars",
        "article_title": "Living in the shadow of a great man",
        "created_at": 1586642520000,
    },
    {
        "body": "Lobster pot",
        "votes": 0,
        "author": "icellusedkars",
        "article_title": "Living in the shadow of a great man",
        "created_at": 1589577540000,
    },
    {
        "body": "Delicious crackerbreads",
        "votes": 0,
        "author": "icellusedkars",
        "article_title": "Living in the shadow of a great man",
        "created_at": 1586899140000,
    },
    {
        "body": "Superficially charming",
        "votes": 0,
        "author": "icellusedkars",
        "article_title": "Living in the shadow of a great man",
        "created_at": 1577848080000,
    },
    {
        "body": "git push origin master",
        "votes": 0,
        "author": "icellusedkars",
        "article_title": "Eight pug gifs that remind me of mitch",
        "created_at": 1592641440000,
    },
    {
        "body": "Ambidextrous marsupial",
        "votes": 0,
        "author": "icellusedkars",
        "article_title": "Eight pug gifs that remind me of mitch",
        "created_at": 1600560600000,
    },
    {
        "body": "Massive intercranial brain haemorrhage",
        "votes": 0,
        "author": "icellusedkars",
        "article_title": "Living in the shadow of a great man",
        "created_at": 1583133000000,
    },
    {
        "body": "Fruit pastilles",
        "votes": 0,
        "author": "icellusedkars",
        "article_title": "Living in the shadow of a great man",
        "created_at": 1592220300000,
    },
    {
        "body": "What do you see? I have no idea where this will lead us. This place I speak of, is known as the Black Lodge.",
        "votes": 16,
        "author": "icellusedkars",
        "article_title": "UNCOVERED: catspiracy to bring down democracy",
        "created_at": 1591682400000,
    },
    {
        "body": "I am 100% sure that we're not completely sure.",
        "votes": 1,
        "author": "butter_bridge",
        "article_title": "UNCOVERED: catspiracy to bring down democracy",
        "created_at": 1606176480000,
    },
    {
        "body": "This is a bad article name",
        "votes": 1,
        "author": "butter_bridge",
        "article_title": "A",
        "created_at": 1602433380000,
    },
    {
        "body": "The owls are not what they seem.",
        "votes": 20,
        "author": "icellusedkars",
        "article_title": "They're not exactly dogs, are they?",
        "created_at": 1584205320000,
    },
    {
        "body": "This morning, I showered for nine minutes.",
        "votes": 16,
        "author": "butter_bridge",
        "article_title": "Living in the shadow of a great man",
        "created_at": 1595294400000,
    },
]

SAMPLE_DATA = {
    "topics": TOPICS,
    "users": USERS,
    "articles": ARTICLES,
    "comments": COMMENTS,
}
