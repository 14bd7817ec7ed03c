"""Built-in Jinja2 prompt templates for commit message generation."""

DEFAULT_FILE_DIFF_PROMPT = """You are an expert programmer summarizing a git diff.
Reminders about the git diff format:
For every file, there are a few metadata lines, like (for example):
```
diff --git a/lib/index.js b/lib/index.js
index aadf691..bfef603 100644
--- a/lib/index.js
+++ b/lib/index.js
```
This means that `lib/index.js` was modified in this commit. Note that this is only an example.
Then there is a specifier of the lines that were modified.
A line starting with `+` means it was added.
A line starting with `-` means that line was deleted.
A line that starts with neither `+` nor `-` is code given for context and is not part of the diff.

Do not include the file name as another part of the comment.
Do not use the characters `[` or `]` in the summary.
Write every summary comment in a new line.
Comments should be in a bullet point list, each line starting with a `-`.
The summary should not include comments copied from the code.
Readability is top priority. Write only the most important comments about the diff.
When in doubt, write fewer comments and not more.

EXAMPLE SUMMARY COMMENTS:
```
- Raise the amount of returned recordings from `10` to `100`
- Fix a typo in the github action name
- Move the `octokit` initialization to a separate file
- Add an OpenAI API for completions
```
Do not include parts of the example in your summary.

CONSIDER THE FOLLOWING COMMIT MESSAGE FOR CONTEXT:

```
{{ commit_message }}
```

THE GIT DIFF TO BE SUMMARIZED:
```
{{ file_diff }}
```

THE SUMMARY:"""

DEFAULT_COMMIT_SUMMARY_PROMPT = """You are an expert programmer writing a commit message.
You went over every file that was changed in it.
For some of these files the changes were too big and were omitted in the file summaries.
Please summarize the commit.
Write your response in bullet points, using the imperative tense.
Start each bullet point with a `-`.
Write a high level description. Do not repeat the commit summaries or the file summaries.
Write the most important bullet points. The list should not be more than a few bullet points.
{% if commit_message %}
CONSIDER THE FOLLOWING COMMIT MESSAGE FOR CONTEXT:

```
{{ commit_message }}
```
{% endif %}
THE FILE SUMMARIES:
```
{{ summary_points }}
```

Remember to write only the most important points and do not write more than a few bullet points.

THE COMMIT MESSAGE:"""

DEFAULT_COMMIT_TITLE_PROMPT = """You are an expert programmer writing a commit message title.
You went over every file that was changed in it.
Some of these files changes were too big, and were omitted in the summaries below.
Please summarize the commit into a single specific and cohesive theme.
Write your response using the imperative tense following the kernel git commit style guide.
Write a high level title.
Do not repeat the commit summaries or the file summaries.
Do not list individual changes in the title.

EXAMPLE TITLES:
```
Raise the amount of returned recordings
Switch to internal API for completions
Lower numeric tolerance for test files
```

CONSIDER THE FOLLOWING COMMIT MESSAGE FOR CONTEXT:

```
{{ commit_message }}
```

THE FILE SUMMARIES:
```
{{ summary_points }}
```

Remember to write only one line, no more than 50 characters.
THE COMMIT MESSAGE TITLE:"""

DEFAULT_CONVENTIONAL_COMMIT_PREFIX_PROMPT = """You are an expert programmer classifying a commit.
Pick the single label that best describes the changes summarized below:

- build: changes that affect the build system or external dependencies
- chore: other changes that don't modify source or test files
- ci: changes to CI configuration files and scripts
- docs: documentation only changes
- feat: a new feature
- fix: a bug fix
- perf: a code change that improves performance
- refactor: a code change that neither fixes a bug nor adds a feature
- style: changes that do not affect the meaning of the code (formatting, whitespace)
- test: adding missing tests or correcting existing tests

THE FILE SUMMARIES:
```
{{ summary_points }}
```

Answer with the label only, in lowercase, without punctuation.
THE LABEL:"""

DEFAULT_TRANSLATION_PROMPT = """You are a professional translator of software commit messages.
Translate the commit message below into {{ output_language }}.
Keep file paths, code identifiers, bullet markers and line breaks unchanged.
Output only the translated commit message.

THE COMMIT MESSAGE:
```
{{ commit_message }}
```

THE TRANSLATED COMMIT MESSAGE:"""
